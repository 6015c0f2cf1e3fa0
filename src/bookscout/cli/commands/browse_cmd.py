# ABOUTME: The `bookscout category` and `bookscout trending` browse commands.
# ABOUTME: Lists books for a fixed subject category or the trending feed.

import click
from rich.console import Console

from bookscout.catalog.query import CATEGORIES
from bookscout.cli import session
from bookscout.cli.display import report_results
from bookscout.cli.options import api_key_option, max_results_option


@click.command("category")
@click.argument("name", type=click.Choice(list(CATEGORIES)))
@api_key_option
@max_results_option
def category(name: str, api_key: str | None, max_results: int) -> None:
    """Browse books in one subject category."""
    console = Console()
    controller = session.run_search(
        lambda c: c.select_category(name), api_key=api_key, max_results=max_results
    )
    console.print(f"[bold]{CATEGORIES[name]}[/bold]")
    report_results(console, controller)


@click.command("trending")
@api_key_option
@max_results_option
def trending(api_key: str | None, max_results: int) -> None:
    """Show a page of popular books."""
    console = Console()
    controller = session.run_search(
        lambda c: c.load_trending(), api_key=api_key, max_results=max_results
    )
    report_results(console, controller)
