"""CLI command: stylesig resolve -- compute the merged style of a path."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stylesig.model.stereotype import Stereotype
from stylesig.signature import InvalidTokenError
from stylesig.stylesheet import (
    StyleBuilder,
    StyleSheetError,
    parse_style_sheet,
    selector_signature,
)


@click.command()
@click.argument("sheet", type=click.Path(exists=True))
@click.argument("path", nargs=-1, required=True)
@click.option(
    "--stereotype",
    default="",
    help='Stereotype text attached to the element, e.g. "<<Foo>> <<$bar>>".',
)
def resolve(sheet: str, path: tuple[str, ...], stereotype: str) -> None:
    """Resolve the style that SHEET gives to the element style PATH."""
    try:
        source = Path(sheet).read_text(encoding="utf-8")
        builder = StyleBuilder(parse_style_sheet(source))
    except StyleSheetError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    try:
        signature = selector_signature(list(path))
        if stereotype:
            stereo = Stereotype.parse(stereotype)
            signature = signature.add_stereotype_labels(stereo).for_stereotype_itself(
                stereo
            )
    except InvalidTokenError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    style = builder.get_merged_style(signature)
    if style is None:
        click.echo(f"No style for {signature}")
        sys.exit(1)

    click.echo(f"Signature: {style.signature}")
    for name, value in style.properties.items():
        click.echo(f"  {name}: {value}")
