# ABOUTME: Google Books catalog client implementation.
# ABOUTME: Runs searches and single-volume lookups, mapping failures to the internal error taxonomy.

import asyncio
import logging
import random
from collections.abc import Awaitable
from typing import Any, TypeVar
from urllib.parse import quote

from bookscout.catalog.googlebooks_parser import parse_search_response, parse_volume
from bookscout.catalog.http import (
    CatalogHTTPError,
    CatalogHttpClient,
    CatalogUnreachableError,
    HttpClient,
)
from bookscout.catalog.intents import SearchIntent
from bookscout.catalog.outcome import (
    BookLookupError,
    ErrorKind,
    SearchFailure,
    SearchOutcome,
    SearchResults,
)
from bookscout.catalog.query import DEFAULT_MAX_RESULTS, QueryValidationError, build_query
from bookscout.catalog.types import Book

logger = logging.getLogger(__name__)

GOOGLE_BOOKS_API_BASE = "https://www.googleapis.com/books/v1"

SEARCH_FAILED_MESSAGE = "Failed to search books. Please try again."
FETCH_FAILED_MESSAGE = "Failed to fetch book details"
NOT_FOUND_MESSAGE = "Book not found"
UNREACHABLE_MESSAGE = "Could not reach the book catalog. Check your connection and try again."
CANCELLED_MESSAGE = "Request cancelled"

T = TypeVar("T")


class _RequestCancelled(Exception):
    """The caller's cancellation signal fired before the response arrived."""


async def _unless_cancelled(request: Awaitable[T], cancel: asyncio.Event | None) -> T:
    """Await a request, abandoning it as soon as the cancel event is set.

    The underlying request task is cancelled on a best-effort basis; callers
    must not rely on it having stopped.
    """
    if cancel is None:
        return await request
    if cancel.is_set():
        if asyncio.iscoroutine(request):
            request.close()
        raise _RequestCancelled

    request_task = asyncio.ensure_future(request)
    waiter = asyncio.ensure_future(cancel.wait())
    try:
        await asyncio.wait({request_task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        waiter.cancel()
        if not request_task.done():
            request_task.cancel()

    if request_task.done():
        return request_task.result()
    raise _RequestCancelled


class GoogleBooksCatalog:
    """Catalog client backed by the Google Books volumes API.

    Stateless apart from configuration: every call builds its request from
    the intent, and nothing is cached. Uses a dependency-injected HttpClient
    for testability.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        api_key: str | None = None,
        base_url: str = GOOGLE_BOOKS_API_BASE,
        max_results: int = DEFAULT_MAX_RESULTS,
        rng: random.Random | None = None,
    ) -> None:
        self._http = http_client if http_client is not None else CatalogHttpClient()
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._max_results = max_results
        self._rng = rng

    @property
    def name(self) -> str:
        return "googlebooks"

    def _params(self, extra: dict[str, str] | None = None) -> dict[str, str]:
        params = dict(extra or {})
        if self._api_key:
            params["key"] = self._api_key
        return params

    async def search(
        self, intent: SearchIntent, cancel: asyncio.Event | None = None
    ) -> SearchOutcome:
        """Run one search for the given intent.

        Never raises for request failures; every failure is returned as a
        SearchFailure so the controller can apply or discard it uniformly.
        """
        try:
            plan = build_query(intent, max_results=self._max_results, rng=self._rng)
        except QueryValidationError as exc:
            return SearchFailure(ErrorKind.VALIDATION, str(exc))

        params = self._params(
            {
                "q": plan.query,
                "maxResults": str(plan.max_results),
                "startIndex": str(plan.start_index),
                "printType": "books",
            }
        )
        url = f"{self._base_url}/volumes"
        logger.debug("Searching %s for q=%r", url, plan.query)

        try:
            data: dict[str, Any] = await _unless_cancelled(
                self._http.get(url, params=params), cancel
            )
        except _RequestCancelled:
            logger.debug("Search for q=%r cancelled", plan.query)
            return SearchFailure(ErrorKind.CANCELLED, CANCELLED_MESSAGE)
        except CatalogHTTPError as exc:
            logger.warning("Search failed for q=%r: %s", plan.query, exc)
            return SearchFailure(ErrorKind.UPSTREAM, exc.message or SEARCH_FAILED_MESSAGE)
        except CatalogUnreachableError as exc:
            logger.warning("Search failed for q=%r: %s", plan.query, exc)
            return SearchFailure(ErrorKind.UNREACHABLE, UNREACHABLE_MESSAGE)

        books, total = parse_search_response(data)
        return SearchResults(books=books, total_count=total)

    async def get_by_id(self, book_id: str, cancel: asyncio.Event | None = None) -> Book:
        """Fetch a single volume by its catalog id.

        Raises:
            BookLookupError: NOT_FOUND on HTTP 404, UPSTREAM on other HTTP
                errors, UNREACHABLE on transport failure, CANCELLED when the
                cancel event fires first.
        """
        url = f"{self._base_url}/volumes/{quote(book_id, safe='')}"
        try:
            data = await _unless_cancelled(self._http.get(url, params=self._params()), cancel)
        except _RequestCancelled as exc:
            raise BookLookupError(ErrorKind.CANCELLED, CANCELLED_MESSAGE) from exc
        except CatalogHTTPError as exc:
            logger.warning("Lookup failed for %s: %s", book_id, exc)
            if exc.status_code == 404:
                raise BookLookupError(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE) from exc
            raise BookLookupError(ErrorKind.UPSTREAM, exc.message or FETCH_FAILED_MESSAGE) from exc
        except CatalogUnreachableError as exc:
            logger.warning("Lookup failed for %s: %s", book_id, exc)
            raise BookLookupError(ErrorKind.UNREACHABLE, FETCH_FAILED_MESSAGE) from exc

        return parse_volume(data)

    async def aclose(self) -> None:
        close = getattr(self._http, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "GoogleBooksCatalog":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
