# ABOUTME: Rich rendering of controller state for the Bookscout CLI.
# ABOUTME: Prints result tables and detail views, and turns error states into exit codes.

from rich.console import Console
from rich.table import Table

from bookscout.catalog.controller import Errored, SearchController
from bookscout.catalog.formatters import (
    format_authors,
    format_isbn,
    format_page_count,
    format_rating,
    format_year,
    truncate_text,
)
from bookscout.catalog.types import Book


def report_results(console: Console, controller: SearchController) -> None:
    """Print the controller's settled state.

    Raises SystemExit(1) when the search ended in an error.
    """
    state = controller.state
    if isinstance(state, Errored):
        console.print(f"[red]Error:[/red] {state.message}")
        raise SystemExit(1)

    books = controller.books
    if not books:
        console.print("[yellow]No books found.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Year", width=7)
    table.add_column("Rating", width=6)

    for book in books:
        table.add_row(
            book.id,
            book.title,
            format_authors(book.authors),
            format_year(book.published_date),
            format_rating(book.average_rating),
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} of {controller.total_count} result(s)[/dim]")


def render_book(console: Console, book: Book, full: bool = False) -> None:
    """Print every known field of a single book."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", book.id)
    table.add_row("Title", book.title)
    table.add_row("Author", book.author)
    table.add_row("Published", format_year(book.published_date))
    if book.publisher:
        table.add_row("Publisher", book.publisher)
    table.add_row("Pages", format_page_count(book.page_count))
    table.add_row("ISBN", format_isbn(book.isbn))
    if book.language:
        table.add_row("Language", book.language)
    if book.average_rating is not None:
        rating = format_rating(book.average_rating)
        if book.ratings_count:
            rating = f"{rating} ({book.ratings_count} ratings)"
        table.add_row("Rating", rating)
    if book.categories:
        table.add_row("Categories", ", ".join(book.categories))
    if book.cover_image:
        table.add_row("Cover", book.cover_image)
    if book.description:
        description = book.description if full else truncate_text(book.description)
        table.add_row("Description", description)

    console.print(table)
