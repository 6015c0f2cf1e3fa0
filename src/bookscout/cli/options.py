# ABOUTME: Shared Click options for Bookscout CLI commands.
# ABOUTME: Provides reusable decorators for the API key and page size.

import click

from bookscout.catalog.query import DEFAULT_MAX_RESULTS, MAX_RESULTS_LIMIT

api_key_option = click.option(
    "--api-key",
    envvar="GOOGLE_BOOKS_API_KEY",
    default=None,
    help="Google Books API key (default: $GOOGLE_BOOKS_API_KEY, optional).",
)

max_results_option = click.option(
    "-n",
    "--max-results",
    type=click.IntRange(1, MAX_RESULTS_LIMIT),
    default=DEFAULT_MAX_RESULTS,
    show_default=True,
    help="Number of results to fetch.",
)
