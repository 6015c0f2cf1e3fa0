# ABOUTME: The `bookscout search` command for free-text catalog search.
# ABOUTME: Searches any field, or only titles or authors, and prints a result table.

import click
from rich.console import Console

from bookscout.catalog.controller import MIN_QUERY_LENGTH, Idle, SearchController
from bookscout.catalog.intents import ByAuthor, ByTitle
from bookscout.cli import session
from bookscout.cli.display import report_results
from bookscout.cli.options import api_key_option, max_results_option


@click.command("search")
@click.argument("query")
@click.option(
    "--by",
    "field",
    type=click.Choice(["any", "title", "author"]),
    default="any",
    show_default=True,
    help="Restrict the search to one field.",
)
@api_key_option
@max_results_option
def search(query: str, field: str, api_key: str | None, max_results: int) -> None:
    """Search the Google Books catalog by title, author, or any text."""
    console = Console()

    def action(controller: SearchController) -> None:
        if field == "title":
            controller.search(ByTitle(query))
        elif field == "author":
            controller.search(ByAuthor(query))
        else:
            controller.submit_free_text(query)

    controller = session.run_search(action, api_key=api_key, max_results=max_results)

    if isinstance(controller.state, Idle):
        console.print(
            f"[yellow]Query too short, enter at least {MIN_QUERY_LENGTH} characters.[/yellow]"
        )
        return

    report_results(console, controller)
