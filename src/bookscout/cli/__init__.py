# ABOUTME: CLI package for Bookscout, built on Click.
# ABOUTME: Defines the root command group, configures logging, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bookscout.cli.commands import browse_cmd, info_cmd, search_cmd


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.group()
@click.version_option(package_name="bookscout")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Bookscout - search and browse the Google Books catalog."""
    _configure_logging(verbose)


cli.add_command(search_cmd.search)
cli.add_command(browse_cmd.category)
cli.add_command(browse_cmd.trending)
cli.add_command(info_cmd.info)
