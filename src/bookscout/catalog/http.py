# ABOUTME: Async HTTP client abstraction for catalog API calls.
# ABOUTME: Maps HTTP and transport failures to exceptions, retries transport errors with backoff.

import asyncio
import logging
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)


class CatalogFetchError(Exception):
    """Raised when an HTTP request to the catalog fails."""


class CatalogHTTPError(CatalogFetchError):
    """The catalog answered with a non-success status.

    message carries the provider's own error text when the response body
    was a structured error document, otherwise None.
    """

    def __init__(self, status_code: int, url: str, message: str | None = None) -> None:
        super().__init__(f"HTTP {status_code} from {url}" + (f": {message}" if message else ""))
        self.status_code = status_code
        self.url = url
        self.message = message


class CatalogUnreachableError(CatalogFetchError):
    """No response was received (connection failure, DNS, timeout)."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for async HTTP GET operations against the catalog API."""

    async def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...


def extract_error_message(response: httpx.Response) -> str | None:
    """Pull the message out of a Google-style {"error": {"message": ...}} body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return message if isinstance(message, str) and message else None
    if isinstance(error, str) and error:
        return error
    return None


class CatalogHttpClient:
    """Async HTTP client for catalog API calls.

    Wraps httpx.AsyncClient. Transport failures are retried a bounded number
    of times with exponential backoff; HTTP status errors are never retried.
    """

    def __init__(
        self,
        *,
        timeout: float = 10.0,
        max_retries: int = 2,
        retry_delay: float = 0.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": "bookscout/0.1.0"},
            "timeout": timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)
        self._max_retries = max_retries
        self._retry_delay = retry_delay

    async def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request, retrying transport failures.

        Args:
            url: The URL to request.
            params: Optional query parameters.

        Returns:
            Parsed JSON response body.

        Raises:
            CatalogHTTPError: On any non-2xx response.
            CatalogUnreachableError: When no response arrives after all attempts.
        """
        attempts = 1 + self._max_retries
        for attempt in range(attempts):
            try:
                response = await self._client.get(url, params=params)
            except httpx.TransportError as exc:
                if attempt == attempts - 1:
                    raise CatalogUnreachableError(f"Request failed: {url}: {exc}") from exc
                delay = self._retry_delay * (2**attempt)
                logger.warning(
                    "Request to %s failed (%s), retrying in %.1fs (attempt %d/%d)",
                    url,
                    exc,
                    delay,
                    attempt + 1,
                    self._max_retries,
                )
                await asyncio.sleep(delay)
                continue

            if response.is_success:
                try:
                    return response.json()
                except ValueError as exc:
                    raise CatalogHTTPError(
                        response.status_code, url, "Malformed response body"
                    ) from exc
            raise CatalogHTTPError(response.status_code, url, extract_error_message(response))

        # The loop returns or raises on its final attempt.
        raise CatalogUnreachableError(f"Request failed: {url}")

    async def aclose(self) -> None:
        await self._client.aclose()
