"""Parsing of ``depth(N)`` threshold tokens."""

from __future__ import annotations

import re
from typing import Iterable

__all__ = ["parse_depth", "single_depth"]

_DEPTH_RE = re.compile(r"depth\((?P<value>[0-9]+)\)")


def parse_depth(token: str) -> int | None:
    """Return N for a ``depth(N)`` token, or None for any other token."""
    match = _DEPTH_RE.fullmatch(token)
    if match is None:
        return None
    try:
        return int(match.group("value"))
    except ValueError:
        return None


def single_depth(tokens: Iterable[str]) -> int | None:
    """Return the depth of the only depth token in *tokens*.

    None when there is no depth token or more than one, so the result
    does not depend on token order.
    """
    found: int | None = None
    for token in tokens:
        depth = parse_depth(token)
        if depth is None:
            continue
        if found is not None:
            return None
        found = depth
    return found
