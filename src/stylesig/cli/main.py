"""stylesig CLI entry point: Click group with subcommands."""

import logging

import click

from stylesig import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stylesig")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """stylesig - match style signatures against nested style sheets."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stylesig.cli.inspect import inspect  # noqa: E402
from stylesig.cli.match import match  # noqa: E402
from stylesig.cli.resolve import resolve  # noqa: E402

cli.add_command(inspect)
cli.add_command(match)
cli.add_command(resolve)
