# ABOUTME: Core data structure for a normalized catalog book.
# ABOUTME: Book is the interchange format between the catalog client, controller, and CLI.

from dataclasses import dataclass

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_AUTHOR = "Unknown Author"


@dataclass(frozen=True)
class Book:
    """A single book as returned by the remote catalog, normalized.

    Immutable once constructed. Every field except id, title, and authors is
    optional because catalog records are frequently sparse. Authors always
    holds at least one entry; the normalizer substitutes a sentinel when the
    source has none.
    """

    id: str
    title: str = UNKNOWN_TITLE
    authors: tuple[str, ...] = (UNKNOWN_AUTHOR,)
    published_date: str | None = None
    description: str | None = None
    cover_image: str | None = None
    thumbnail: str | None = None
    average_rating: float | None = None
    ratings_count: int | None = None
    page_count: int | None = None
    categories: tuple[str, ...] | None = None
    language: str | None = None
    isbn: str | None = None
    publisher: str | None = None

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors)
