"""CLI command: purifycss purify -- strip unused rules from stylesheets."""

from __future__ import annotations

import logging
import sys

import click

from purifycss.config import DEFAULT_OPTIONS
from purifycss.parser import ParseError
from purifycss.pipeline import purify as run_purify


@click.command()
@click.argument("content", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--css",
    "css_files",
    multiple=True,
    required=True,
    type=click.Path(exists=True),
    help="Stylesheet to purify (repeatable)",
)
@click.option("--out", "output", default=None, help="Write purified CSS to this path")
@click.option("--min", "minify", is_flag=True, help="Minify the purified CSS")
@click.option("--info", is_flag=True, help="Report size reduction and timing")
@click.option("--rejected", is_flag=True, help="Report rejected selectors")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def purify(
    content: tuple[str, ...],
    css_files: tuple[str, ...],
    output: str | None,
    minify: bool,
    info: bool,
    rejected: bool,
    verbose: bool,
) -> None:
    """Purify stylesheets against HTML/JS/template CONTENT files.

    Prints the purified CSS unless --out is given.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )
    options = DEFAULT_OPTIONS.merged(
        output=output, minify=minify, info=info, rejected=rejected
    )

    try:
        source = run_purify(list(content), list(css_files), options)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if not output:
        click.echo(source, nl=False)
