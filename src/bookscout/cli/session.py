# ABOUTME: Drives a SearchController for a single CLI invocation.
# ABOUTME: Builds the Google Books client, runs one intent to completion, and closes everything.

import asyncio
from collections.abc import Callable

from bookscout.catalog.controller import SearchController
from bookscout.catalog.googlebooks import GoogleBooksCatalog
from bookscout.catalog.http import CatalogHttpClient
from bookscout.catalog.types import Book


def create_catalog(api_key: str | None, max_results: int) -> GoogleBooksCatalog:
    """Create the default catalog client (Google Books over HTTPS)."""
    return GoogleBooksCatalog(CatalogHttpClient(), api_key=api_key, max_results=max_results)


async def _settle(
    catalog: GoogleBooksCatalog, action: Callable[[SearchController], None]
) -> SearchController:
    # No debounce: a CLI invocation submits its text exactly once.
    controller = SearchController(catalog, debounce=0.0)
    try:
        action(controller)
        await controller.wait_until_settled()
    finally:
        await controller.aclose()
        await catalog.aclose()
    return controller


def run_search(
    action: Callable[[SearchController], None], *, api_key: str | None, max_results: int
) -> SearchController:
    """Apply one intent to a fresh controller and return it once its request settles."""
    catalog = create_catalog(api_key, max_results)
    return asyncio.run(_settle(catalog, action))


async def _lookup(catalog: GoogleBooksCatalog, book_id: str) -> tuple[Book | None, str | None]:
    controller = SearchController(catalog)
    try:
        book = await controller.get_by_id(book_id)
    finally:
        await catalog.aclose()
    return book, controller.error_message


def run_lookup(book_id: str, *, api_key: str | None) -> tuple[Book | None, str | None]:
    """Fetch a single book. Returns (book, None) or (None, error message)."""
    catalog = create_catalog(api_key, 1)
    return asyncio.run(_lookup(catalog, book_id))
