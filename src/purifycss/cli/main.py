"""purifycss CLI entry point: Click group with subcommands."""

import click

from purifycss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="purifycss")
def cli() -> None:
    """purifycss - remove CSS rules that your content never uses."""


# Import and register subcommands
from purifycss.cli.purify import purify  # noqa: E402
from purifycss.cli.inspect import inspect  # noqa: E402

cli.add_command(purify)
cli.add_command(inspect)
