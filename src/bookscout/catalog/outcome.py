# ABOUTME: SearchOutcome types and the internal error taxonomy for catalog requests.
# ABOUTME: One outcome is produced per request and consumed once by the SearchController.

from dataclasses import dataclass
from enum import Enum

from bookscout.catalog.types import Book


class ErrorKind(Enum):
    """Classification of a failed catalog request."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UPSTREAM = "upstream"
    UNREACHABLE = "unreachable"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SearchResults:
    """A successful search: books in the provider's relevance order."""

    books: tuple[Book, ...]
    total_count: int


@dataclass(frozen=True)
class SearchFailure:
    """A failed search with a user-facing message."""

    kind: ErrorKind
    message: str

    @property
    def is_cancelled(self) -> bool:
        return self.kind is ErrorKind.CANCELLED


SearchOutcome = SearchResults | SearchFailure


class BookLookupError(Exception):
    """Raised when a single-volume fetch fails."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
