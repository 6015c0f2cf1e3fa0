# ABOUTME: Display helpers for Book fields (authors, year, rating, ISBN, long text).
# ABOUTME: Used by the CLI to render search results and detail views.

import re

_YEAR_RE = re.compile(r"^(\d{4})")


def format_year(published_date: str | None) -> str:
    """Reduce a Google Books date ("2004", "2004-05", "2004-05-03") to its year."""
    if not published_date:
        return "Unknown"
    match = _YEAR_RE.match(published_date.strip())
    return match.group(1) if match else "Unknown"


def format_authors(authors: tuple[str, ...] | list[str] | None) -> str:
    """Compact author line: "A", "A & B", or "A and N others"."""
    if not authors:
        return "Unknown Author"
    if len(authors) == 1:
        return authors[0]
    if len(authors) == 2:
        return " & ".join(authors)
    return f"{authors[0]} and {len(authors) - 1} others"


def format_rating(rating: float | None) -> str:
    if not rating:
        return "N/A"
    return f"{rating:.1f}"


def format_page_count(pages: int | None) -> str:
    if not pages:
        return "Unknown"
    return f"{pages} pages"


def truncate_text(text: str, max_length: int = 150) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + "..."


def format_isbn(isbn: str | None) -> str:
    """Hyphenate a 13-digit ISBN as 978-0-1234-5678-9; other values pass through."""
    if not isbn:
        return "N/A"
    if len(isbn) == 13:
        return f"{isbn[:3]}-{isbn[3:4]}-{isbn[4:8]}-{isbn[8:12]}-{isbn[12:]}"
    return isbn
