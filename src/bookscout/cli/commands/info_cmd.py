# ABOUTME: The `bookscout info` command for displaying one catalog volume.
# ABOUTME: Fetches a book by its Google Books id and shows all known fields.

import click
from rich.console import Console

from bookscout.cli import session
from bookscout.cli.display import render_book
from bookscout.cli.options import api_key_option


@click.command("info")
@click.argument("volume_id")
@click.option("--full", is_flag=True, default=False, help="Show the untruncated description.")
@api_key_option
def info(volume_id: str, full: bool, api_key: str | None) -> None:
    """Show detailed metadata for a book by its catalog ID."""
    console = Console()
    book, error = session.run_lookup(volume_id, api_key=api_key)

    if book is None:
        console.print(f"[red]Error:[/red] {error or 'Failed to fetch book details'}")
        raise SystemExit(1)

    render_book(console, book, full=full)
