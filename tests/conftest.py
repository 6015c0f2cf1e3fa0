# ABOUTME: Shared pytest fixtures for Bookscout tests.
# ABOUTME: Routes CLI catalog traffic through a fake httpx transport serving canned responses.

from collections.abc import Callable

import pytest

from bookscout.catalog.googlebooks import GoogleBooksCatalog
from bookscout.catalog.http import CatalogHttpClient
from bookscout.cli import session
from tests.fixtures.transports import FakeTransport, googlebooks_route


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping table cells in captured CLI output."""
    monkeypatch.setenv("COLUMNS", "200")


@pytest.fixture
def install_transport(monkeypatch: pytest.MonkeyPatch) -> Callable[[FakeTransport], None]:
    """Make CLI commands build their catalog on top of the given fake transport."""

    def _install(transport: FakeTransport) -> None:
        def _create(api_key: str | None, max_results: int) -> GoogleBooksCatalog:
            http_client = CatalogHttpClient(transport=transport, retry_delay=0.0)
            return GoogleBooksCatalog(http_client, api_key=api_key, max_results=max_results)

        monkeypatch.setattr(session, "create_catalog", _create)

    return _install


@pytest.fixture
def offline_catalog(install_transport: Callable[[FakeTransport], None]) -> FakeTransport:
    """Route CLI requests to a transport that mimics the volumes API."""
    transport = FakeTransport(route=googlebooks_route)
    install_transport(transport)
    return transport
