"""CLI command: purifycss inspect -- display stylesheet structure."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from purifycss.model.stylesheet import AtRule, Comment, Rule, Stylesheet
from purifycss.parser import ParseError, parse_css


def _echo_stylesheet(stylesheet: Stylesheet, indent: str = "") -> None:
    for node in stylesheet.nodes:
        if isinstance(node, Rule):
            click.echo(f"{indent}rule: {len(node.selectors)} selector(s)")
            for twig in node.selectors:
                parts = "  ".join(f"{p.kind.value}={p.value!r}" for p in twig.parts)
                click.echo(f"{indent}  {twig.raw.strip()}")
                click.echo(f"{indent}    {parts}")
        elif isinstance(node, AtRule):
            prelude = node.prelude.strip()
            click.echo(f"{indent}{node.keyword} {prelude} ({node.kind.value})")
            if node.children is not None:
                _echo_stylesheet(node.children, indent + "  ")
        elif isinstance(node, Comment):
            text = node.text if len(node.text) <= 50 else node.text[:50] + "..."
            click.echo(f"{indent}comment: {text}")


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def inspect(cssfile: str) -> None:
    """Parse a stylesheet and display its rules and selector parts.

    Shows each rule's selectors decomposed into kinds and values, with
    conditional at-rules expanded.
    """
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        stylesheet = parse_css(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    twigs = list(stylesheet.twigs())
    click.echo(f"Stylesheet: {css_path.name}")
    click.echo(f"Nodes:     {len(stylesheet.nodes)}")
    click.echo(f"Selectors: {len(twigs)}")
    click.echo()
    _echo_stylesheet(stylesheet)
