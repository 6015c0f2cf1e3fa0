# ABOUTME: Builds Google Books query strings from a SearchIntent.
# ABOUTME: Pure functions; validation failures raise before any network call is made.

import random
from dataclasses import dataclass

from bookscout.catalog.intents import (
    ByAuthor,
    ByTitle,
    Category,
    FreeText,
    SearchIntent,
    Trending,
)

DEFAULT_MAX_RESULTS = 20
MAX_RESULTS_LIMIT = 40  # Google Books rejects maxResults above 40

# Broad terms used for the trending feed. Which one is picked is random and
# not meant to be reproducible; pass an rng to build_query to pin it.
TRENDING_TERMS = ("bestseller", "popular fiction", "award winner")

# Category vocabulary: id -> display label.
CATEGORIES: dict[str, str] = {
    "fiction": "Fiction",
    "science": "Science",
    "history": "History",
    "biography": "Biography",
    "self-help": "Self Help",
    "technology": "Technology",
}


class QueryValidationError(ValueError):
    """Raised when an intent cannot be turned into a query."""


@dataclass(frozen=True)
class QueryPlan:
    """Provider query string plus paging parameters for one request."""

    query: str
    max_results: int = DEFAULT_MAX_RESULTS
    start_index: int = 0


def _require_text(text: str, what: str) -> str:
    cleaned = text.strip()
    if not cleaned:
        raise QueryValidationError(f"{what} must not be empty")
    return cleaned


def _query_string(intent: SearchIntent, rng: random.Random | None) -> str:
    if isinstance(intent, Trending):
        return (rng or random).choice(TRENDING_TERMS)
    if isinstance(intent, Category):
        if intent.category_id not in CATEGORIES:
            raise QueryValidationError(f"Unknown category: {intent.category_id}")
        return f"subject:{intent.category_id}"
    if isinstance(intent, FreeText):
        return _require_text(intent.query, "Search text")
    if isinstance(intent, ByAuthor):
        return f"inauthor:{_require_text(intent.author, 'Author')}"
    if isinstance(intent, ByTitle):
        return f"intitle:{_require_text(intent.title, 'Title')}"
    raise QueryValidationError(f"Unsupported intent: {intent!r}")


def build_query(
    intent: SearchIntent,
    *,
    max_results: int = DEFAULT_MAX_RESULTS,
    rng: random.Random | None = None,
) -> QueryPlan:
    """Translate a search intent into a QueryPlan.

    Args:
        intent: The search to perform.
        max_results: Page size, clamped to the provider's 1..40 range.
        rng: Optional random source for the trending term choice.

    Raises:
        QueryValidationError: For blank text or an unknown category.
    """
    query = _query_string(intent, rng)
    limit = max(1, min(max_results, MAX_RESULTS_LIMIT))
    return QueryPlan(query=query, max_results=limit)
