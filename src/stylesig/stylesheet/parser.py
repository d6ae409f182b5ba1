"""Lark-based parser for nested style sheets.

Syntax example:
    root { FontSize 12 }
    element {
      activity { BackGroundColor #fff; }
      .foo { LineColor red }
    }
    * { depth(1) { FontColor grey } }

Nested blocks extend their parent's selector; ``a, b { ... }`` declares
the same properties for several selectors.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from stylesig.signature.errors import InvalidTokenError
from stylesig.signature.normalize import STAR
from stylesig.signature.signature import Signature
from stylesig.stylesheet.errors import StyleSheetError
from stylesig.stylesheet.model import StyleRule, StyleSheet

__all__ = ["parse_style_sheet", "selector_signature"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_STYLE_TAG_RE = re.compile(r"^[ \t]*</?style>[ \t]*$", re.MULTILINE | re.IGNORECASE)


def selector_signature(words: list[str], parent: Signature | None = None) -> Signature:
    """Extend *parent* (or an empty signature) with the words of one selector."""
    signature = parent if parent is not None else Signature.empty()
    for word in words:
        if word == STAR:
            signature = signature.add_star()
        else:
            signature = signature.add(word)
    return signature


class _Block:
    def __init__(self, selectors: list[list[str]], items: list[object]):
        self.selectors = selectors
        self.items = items


class _Declaration:
    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value


class StyleSheetTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into intermediate block/declaration objects."""

    def phrase(self, items: list[Token]) -> list[str]:
        return [str(t) for t in items]

    def phrases(self, items: list[list[str]]) -> list[list[str]]:
        return list(items)

    def declaration(self, items: list[list[list[str]]]) -> _Declaration:
        phrases = items[0]
        name, *rest = phrases[0]
        if ":" in name:
            name, _, inline = name.partition(":")
            if inline:
                rest.insert(0, inline)
        rest = [w for w in rest if w != ":"]
        if rest and rest[0].startswith(":"):
            rest[0] = rest[0][1:]
        parts = [" ".join(w for w in rest if w)]
        parts.extend(" ".join(p) for p in phrases[1:])
        value = ", ".join(p for p in parts if p)
        if not name or not value:
            raise StyleSheetError(f"Declaration without value: {' '.join(phrases[0])!r}")
        return _Declaration(name.lower(), value)

    tail_declaration = declaration

    def block(self, items: list[object]) -> _Block:
        return _Block(items[0], list(items[1:]))  # type: ignore[arg-type]

    def start(self, items: list[object]) -> list[object]:
        return list(items)


def _collect(
    items: list[object], parents: list[Signature], rules: list[StyleRule]
) -> None:
    """Flatten nested blocks into rules, in source order."""
    properties: dict[str, str] = {}
    for item in items:
        if isinstance(item, _Declaration):
            properties[item.name] = item.value

    if properties:
        for signature in parents:
            rules.append(StyleRule(signature=signature, properties=dict(properties)))

    for item in items:
        if isinstance(item, _Block):
            children = [
                selector_signature(words, parent)
                for parent in parents
                for words in item.selectors
            ]
            _collect(item.items, children, rules)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_style_sheet(source: str) -> StyleSheet:
    """Parse style sheet source into a StyleSheet.

    Declarations outside any block apply to the empty signature.
    ``<style>`` and ``</style>`` wrapper lines are ignored.
    """
    source = _STYLE_TAG_RE.sub("", source)
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        raise StyleSheetError(str(e), line=e.line, column=e.column) from e

    try:
        items = StyleSheetTransformer().transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, StyleSheetError):
            raise e.orig_exc from e
        raise

    rules: list[StyleRule] = []
    try:
        _collect(items, [Signature.empty()], rules)
    except InvalidTokenError as e:
        raise StyleSheetError(str(e)) from e

    logger.debug("Parsed %d style rule(s)", len(rules))
    return StyleSheet(rules=rules)
