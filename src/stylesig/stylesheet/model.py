"""Style sheet model: StyleRule and StyleSheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass

from stylesig.model.style import Style
from stylesig.signature.normalize import STAR
from stylesig.signature.signature import Signature


@dataclass(frozen=True)
class StyleRule:
    """A selector signature paired with its property declarations."""

    signature: Signature
    properties: dict[str, str]

    @property
    def specificity(self) -> int:
        """Number of non-wildcard tokens; more tokens win."""
        return sum(1 for token in self.signature.tokens if token != STAR)

    def to_style(self) -> Style:
        return Style(signature=self.signature, properties=dict(self.properties))


@dataclass(frozen=True)
class StyleSheet:
    """Style rules in source order."""

    rules: list[StyleRule]
