# ABOUTME: SearchIntent variants describing what the user is currently searching for.
# ABOUTME: Intents are hashable value objects; a request and its outcome are scoped to one.

from dataclasses import dataclass


@dataclass(frozen=True)
class Trending:
    """Broad popularity search used at startup and after clearing."""


@dataclass(frozen=True)
class Category:
    """Subject-scoped browse for one entry of the category vocabulary."""

    category_id: str


@dataclass(frozen=True)
class FreeText:
    """Literal text typed by the user."""

    query: str


@dataclass(frozen=True)
class ByAuthor:
    """Free text restricted to the author field."""

    author: str


@dataclass(frozen=True)
class ByTitle:
    """Free text restricted to the title field."""

    title: str


SearchIntent = Trending | Category | FreeText | ByAuthor | ByTitle
