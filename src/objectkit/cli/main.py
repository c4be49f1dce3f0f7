"""objectkit CLI entry point: Click group with subcommands."""

import logging

import click

from objectkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="objectkit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """objectkit - shapes, JSON round-trips and CSS selector building."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from objectkit.cli.area import area  # noqa: E402
from objectkit.cli.build import build  # noqa: E402

cli.add_command(build)
cli.add_command(area)
