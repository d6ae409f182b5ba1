"""CLI command: stylesig inspect -- list the rules of a style sheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylesig.stylesheet import StyleSheetError, parse_style_sheet


@click.command()
@click.argument("sheet", type=click.Path(exists=True))
def inspect(sheet: str) -> None:
    """Parse a style sheet and display its rules with their signatures."""
    try:
        source = Path(sheet).read_text(encoding="utf-8")
        style_sheet = parse_style_sheet(source)
    except StyleSheetError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Rules: {len(style_sheet.rules)}")
    for rule in style_sheet.rules:
        click.echo(f"  [{rule.specificity}] {rule.signature}")
        for name, value in rule.properties.items():
            click.echo(f"      {name}: {value}")
