"""SignatureList: the signatures produced by expanding a stereotype."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from stylesig.model.stereotype import Stereostyles
    from stylesig.model.style import Style
    from stylesig.signature.signature import Signature
    from stylesig.stylesheet.builder import StyleBuilder


@dataclass(frozen=True)
class SignatureList:
    """An ordered collection of signatures, one per stereotype style name."""

    signatures: tuple[Signature, ...] = ()

    def __iter__(self) -> Iterator[Signature]:
        return iter(self.signatures)

    def __len__(self) -> int:
        return len(self.signatures)

    def __getitem__(self, index: int) -> Signature:
        return self.signatures[index]

    def with_stereostyles(self, stereostyles: Stereostyles) -> SignatureList:
        return SignatureList(
            tuple(sig.with_stereostyles(stereostyles) for sig in self.signatures)
        )

    def get_merged_style(self, style_builder: StyleBuilder | None) -> Style | None:
        """Resolve every member and merge the results in order."""
        if style_builder is None:
            return None
        result: Style | None = None
        for sig in self.signatures:
            style = style_builder.get_merged_style(sig)
            if style is None:
                continue
            result = style if result is None else result.merge_with(style)
        return result

    def __str__(self) -> str:
        return " | ".join(str(sig) for sig in self.signatures)
