"""Main CLI entry point."""

import logging

import click

from travel_assistant import __version__
from travel_assistant.cli.db import db
from travel_assistant.cli.states import states


def setup_logging(verbose: bool = False):
    """Configure logging for CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def cli(verbose: bool):
    """Travel Assistant CLI."""
    setup_logging(verbose)


cli.add_command(db)
cli.add_command(states)


if __name__ == "__main__":
    cli()
