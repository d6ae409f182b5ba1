"""StyleBuilder: resolve an element's style path against a style sheet."""

from __future__ import annotations

import logging
from dataclasses import replace

from stylesig.model.style import Style
from stylesig.signature.signature import Signature
from stylesig.signature.signatures import SignatureList
from stylesig.stylesheet.model import StyleRule, StyleSheet

logger = logging.getLogger(__name__)


class StyleBuilder:
    """Merge every rule of a style sheet that applies to a path signature.

    Rules are applied in ascending specificity, ties broken by source
    order, so later and more specific declarations override earlier ones.
    Results are memoized per path signature.
    """

    def __init__(self, style_sheet: StyleSheet) -> None:
        indexed = list(enumerate(style_sheet.rules))
        indexed.sort(key=lambda pair: (pair[1].specificity, pair[0]))
        self._rules: list[StyleRule] = [rule for _, rule in indexed]
        self._cache: dict[Signature, Style | None] = {}

    @property
    def rules(self) -> list[StyleRule]:
        """Rules in application order."""
        return list(self._rules)

    def matching_rules(self, signature: Signature) -> list[StyleRule]:
        return [rule for rule in self._rules if rule.signature.match_all(signature)]

    def get_merged_style(self, signature: Signature | SignatureList) -> Style | None:
        """Return a fresh copy of the memoized style for *signature*."""
        if isinstance(signature, SignatureList):
            return signature.get_merged_style(self)
        if signature not in self._cache:
            self._cache.setdefault(signature, self._resolve(signature))
        style = self._cache[signature]
        if style is None:
            return None
        return replace(style, properties=dict(style.properties))

    def _resolve(self, signature: Signature) -> Style | None:
        matched = self.matching_rules(signature)
        if not matched:
            logger.debug("No style rule applies to %s", signature)
            return None

        styles = [rule.to_style() for rule in matched]
        properties: dict[str, str] = {}
        for style in styles:
            properties.update(style.properties)
        logger.debug("Resolved %s from %d rule(s)", signature, len(matched))
        return Style(signature=signature.merge_with(styles), properties=properties)
