# ABOUTME: Parsing functions for Google Books API JSON responses.
# ABOUTME: Converts volume records into Book instances, degrading bad fields to defaults.

from typing import Any

from bookscout.catalog.types import UNKNOWN_AUTHOR, UNKNOWN_TITLE, Book

_ISBN_13 = "ISBN_13"
_INSECURE_PREFIX = "http://"
_SECURE_PREFIX = "https://"
MIN_RATING = 0.0
MAX_RATING = 5.0


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _optional_count(value: Any) -> int | None:
    """Accept non-negative integers only; bool is rejected even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


def _optional_rating(value: Any) -> float | None:
    """Accept numbers on the 0-5 star scale; anything outside it is absent."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    rating = float(value)
    return rating if MIN_RATING <= rating <= MAX_RATING else None


def _string_list(value: Any) -> list[str]:
    """Keep the non-empty string entries of a JSON list, in source order."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def secure_url(url: Any) -> str | None:
    """Upgrade an http:// image URL to https://.

    URLs that already use https (or any other scheme) are returned unchanged.
    Missing or non-string values yield None.
    """
    url = _optional_str(url)
    if url is None:
        return None
    if url.startswith(_INSECURE_PREFIX):
        return _SECURE_PREFIX + url[len(_INSECURE_PREFIX) :]
    return url


def select_isbn(identifiers: Any) -> str | None:
    """Return the first ISBN-13 from a list of industry identifiers.

    Google Books lists ISBN_10, ISBN_13 and assorted other identifier types in
    no guaranteed order. Only ISBN-13 is accepted.
    """
    if not isinstance(identifiers, list):
        return None
    for entry in identifiers:
        entry = _as_dict(entry)
        if entry.get("type") == _ISBN_13:
            isbn = _optional_str(entry.get("identifier"))
            if isbn:
                return isbn
    return None


def parse_volume(data: Any) -> Book:
    """Parse a Google Books volume record into a Book.

    Accepts both search-result items and the single-volume endpoint response,
    which share the {id, volumeInfo} shape. Never raises: missing or
    malformed fields fall back to their defaults.
    """
    data = _as_dict(data)
    info = _as_dict(data.get("volumeInfo"))
    image_links = _as_dict(info.get("imageLinks"))

    book_id = data.get("id")
    authors = _string_list(info.get("authors")) or [UNKNOWN_AUTHOR]
    categories = _string_list(info.get("categories"))

    return Book(
        id=book_id if isinstance(book_id, str) else "",
        title=_optional_str(info.get("title")) or UNKNOWN_TITLE,
        authors=tuple(authors),
        published_date=_optional_str(info.get("publishedDate")),
        description=_optional_str(info.get("description")),
        cover_image=secure_url(image_links.get("thumbnail")),
        thumbnail=secure_url(image_links.get("smallThumbnail")),
        average_rating=_optional_rating(info.get("averageRating")),
        ratings_count=_optional_count(info.get("ratingsCount")),
        page_count=_optional_count(info.get("pageCount")),
        categories=tuple(categories) if categories else None,
        language=_optional_str(info.get("language")),
        isbn=select_isbn(info.get("industryIdentifiers")),
        publisher=_optional_str(info.get("publisher")),
    )


def parse_search_response(data: Any) -> tuple[tuple[Book, ...], int]:
    """Parse a /volumes search envelope into (books, total_count).

    A missing items list is an empty result, not an error; Google omits the
    field entirely when nothing matches. A missing total defaults to 0.
    """
    data = _as_dict(data)
    items = data.get("items")
    if not isinstance(items, list):
        items = []
    total = _optional_count(data.get("totalItems")) or 0
    return tuple(parse_volume(item) for item in items), total
