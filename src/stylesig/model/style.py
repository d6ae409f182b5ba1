"""Style: property declarations selected by a signature."""

from __future__ import annotations

from dataclasses import dataclass, field

from stylesig.signature.signature import Signature


@dataclass(frozen=True)
class Style:
    """A resolved style.

    ``properties`` maps lower-cased property names to raw values, in
    declaration order.
    """

    signature: Signature
    properties: dict[str, str] = field(default_factory=dict)

    def value(self, name: str, default: str | None = None) -> str | None:
        return self.properties.get(name.lower(), default)

    def merge_with(self, other: Style) -> Style:
        """Return a style where *other*'s properties override ours."""
        merged = dict(self.properties)
        merged.update(other.properties)
        return Style(
            signature=self.signature.merge_with(other.signature),
            properties=merged,
        )
