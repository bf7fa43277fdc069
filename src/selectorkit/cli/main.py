"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Log builder activity to stderr")
def cli(verbose: bool) -> None:
    """selectorkit - build CSS selectors from typed fragments."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.shapes import area, rect  # noqa: E402

cli.add_command(build)
cli.add_command(rect)
cli.add_command(area)
