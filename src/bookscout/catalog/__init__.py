# ABOUTME: Catalog package for book search orchestration against Google Books.
# ABOUTME: Exports the Book type, search intents, outcomes, the client, and the SearchController.

from bookscout.catalog.controller import SearchController
from bookscout.catalog.googlebooks import GoogleBooksCatalog
from bookscout.catalog.intents import ByAuthor, ByTitle, Category, FreeText, SearchIntent, Trending
from bookscout.catalog.outcome import (
    BookLookupError,
    ErrorKind,
    SearchFailure,
    SearchOutcome,
    SearchResults,
)
from bookscout.catalog.types import Book

__all__ = [
    "Book",
    "BookLookupError",
    "ByAuthor",
    "ByTitle",
    "Category",
    "ErrorKind",
    "FreeText",
    "GoogleBooksCatalog",
    "SearchController",
    "SearchFailure",
    "SearchIntent",
    "SearchOutcome",
    "SearchResults",
    "Trending",
]
