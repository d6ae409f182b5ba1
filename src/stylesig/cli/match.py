"""CLI command: stylesig match -- check a rule selector against a path."""

from __future__ import annotations

import sys

import click

from stylesig.signature import InvalidTokenError
from stylesig.stylesheet import selector_signature


@click.command()
@click.argument("query")
@click.argument("candidate")
def match(query: str, candidate: str) -> None:
    """Check whether the CANDIDATE path satisfies the QUERY rule.

    Both arguments are whitespace separated selector words, e.g.
    ``stylesig match "* depth(1)" "root element depth(2)"``.
    Exits with code 0 on a match, 1 on no match and 2 on an invalid token.
    """
    try:
        query_sig = selector_signature(query.split())
        candidate_sig = selector_signature(candidate.split())
    except InvalidTokenError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if query_sig.match_all(candidate_sig):
        click.echo("match")
        sys.exit(0)
    click.echo("no match")
    sys.exit(1)
