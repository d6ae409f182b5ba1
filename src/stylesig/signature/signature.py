"""Signature: an immutable set of normalized style tokens.

A signature describes either a style rule (the query side) or the style
path of a diagram element (the candidate side). ``query.match_all(path)``
decides whether the rule applies to the path:

    * every non-wildcard token of the rule must be present in the path;
    * a rule without ``*`` never applies to a starred path;
    * a rule with ``*`` and a ``depth(N)`` token applies to any path whose
      own depth token is at least N.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Iterable, Sequence

from stylesig.signature.cache import MatchCache
from stylesig.signature.depth import parse_depth, single_depth
from stylesig.signature.errors import InvalidTokenError
from stylesig.signature.normalize import (
    CLICKABLE,
    SEPARATOR,
    STAR,
    STEREOTYPE,
    STEREOTYPE_PREFIX,
    normalize,
    normalize_name,
)
from stylesig.signature.signatures import SignatureList

if TYPE_CHECKING:
    from stylesig.model.stereotype import Stereostyles, Stereotype
    from stylesig.model.style import Style
    from stylesig.model.url import Url
    from stylesig.stylesheet.builder import StyleBuilder

__all__ = ["Signature", "matches"]


@dataclass(frozen=True, eq=False)
class Signature:
    """A set of normalized tokens plus a flag for dotted (nested) names.

    Equality and hashing use the token set only; token order and the
    ``hierarchical`` flag are ignored.
    """

    tokens: tuple[str, ...] = ()
    hierarchical: bool = False
    _match_cache: MatchCache = field(
        default_factory=MatchCache, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if isinstance(self.tokens, str):
            raise TypeError("Signature tokens must be a sequence of strings, not a str")
        for token in self.tokens:
            if "&" in token:
                raise InvalidTokenError(token)
        normalized = (normalize(token) for token in self.tokens)
        object.__setattr__(self, "tokens", tuple(dict.fromkeys(normalized)))

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_seed(cls, token: str) -> Signature:
        """Create a signature holding a single raw token."""
        if STAR in token or "&" in token or "-" in token:
            raise InvalidTokenError(token)
        return cls((normalize(token),), SEPARATOR in token)

    @classmethod
    def empty(cls) -> Signature:
        return cls()

    @classmethod
    def of(cls, *names: str | Enum) -> Signature:
        """Create a signature from enumerated style names."""
        return cls(tuple(normalize_name(name) for name in names))

    def _with_tokens(self, extra: Iterable[str], hierarchical: bool) -> Signature:
        return Signature(self.tokens + tuple(extra), hierarchical)

    # --- composition ----------------------------------------------------------

    def add(self, token: str | Enum | None) -> Signature:
        """Return a copy with *token* added.

        Enum members are added by their normalized name.
        """
        if token is None:
            return self
        if isinstance(token, Enum):
            token = normalize_name(token)
        if "&" in token:
            raise InvalidTokenError(token)
        return self._with_tokens(
            (normalize(token),), self.hierarchical or SEPARATOR in token
        )

    def add_star(self) -> Signature:
        return self._with_tokens((STAR,), self.hierarchical)

    def add_clickable(self, url: Url | None) -> Signature:
        if url is None:
            return self
        return self._with_tokens((CLICKABLE,), self.hierarchical)

    def add_stereotype_labels(self, stereotype: Stereotype | None) -> Signature:
        """Add one prefixed token per plain label of *stereotype*."""
        if stereotype is None:
            return self
        extra: list[str] = []
        hierarchical = self.hierarchical
        for label in stereotype.labels:
            if "&" in label:
                raise InvalidTokenError(label)
            extra.append(STEREOTYPE_PREFIX + normalize(label))
            hierarchical = hierarchical or SEPARATOR in label
        return self._with_tokens(extra, hierarchical)

    def for_stereotype_itself(
        self, stereotype: Stereotype | None
    ) -> Signature | SignatureList:
        """Expand into one signature per style name of *stereotype*.

        Each expansion carries the ``stereotype`` marker token followed by
        the style name. Returns ``self`` when there is nothing to expand.
        """
        if stereotype is None or not stereotype.style_names:
            return self
        return SignatureList(
            tuple(
                Signature(self.tokens + (STEREOTYPE, normalize(name)), False)
                for name in stereotype.style_names
            )
        )

    def with_stereotype_names(
        self, stereotype: Stereotype | None
    ) -> Signature | SignatureList:
        """Expand like :meth:`for_stereotype_itself`, without the marker token.

        Every expansion is flagged hierarchical.
        """
        if stereotype is None or not stereotype.style_names:
            return self
        return SignatureList(
            tuple(
                Signature(self.tokens + (normalize(name),), True)
                for name in stereotype.style_names
            )
        )

    def with_stereostyles(self, stereostyles: Stereostyles) -> Signature:
        if stereostyles.is_empty:
            return self
        return self._with_tokens(
            (STEREOTYPE_PREFIX + normalize(name) for name in stereostyles.style_names),
            True,
        )

    def merge_with(self, other: Signature | Sequence[Style]) -> Signature:
        """Union this signature with another one, or with the signatures of styles."""
        if isinstance(other, Signature):
            return self._with_tokens(other.tokens, self.hierarchical or other.hierarchical)
        extra: list[str] = []
        for style in other:
            extra.extend(style.signature.tokens)
        return self._with_tokens(extra, self.hierarchical)

    def get_merged_style(self, style_builder: StyleBuilder | None) -> Style | None:
        if style_builder is None:
            return None
        return style_builder.get_merged_style(self)

    # --- queries --------------------------------------------------------------

    @cached_property
    def token_set(self) -> frozenset[str]:
        return frozenset(self.tokens)

    @cached_property
    def depth(self) -> int | None:
        """Value of the single ``depth(N)`` token, or None if there are none or several."""
        return single_depth(self.tokens)

    def is_starred(self) -> bool:
        return STAR in self.token_set

    def match_all(self, other: Signature) -> bool:
        """Return True if the path *other* satisfies this rule."""
        return self._match_cache.get_or_compute(
            other, lambda: self._match_all_impl(other)
        )

    def _match_all_impl(self, other: Signature) -> bool:
        has_star = self.is_starred()
        if other.is_starred() and not has_star:
            return False

        other_depth = other.depth
        for token in self.tokens:
            if token == STAR:
                continue
            token_depth = None
            if has_star and other_depth is not None:
                token_depth = parse_depth(token)
            if token_depth is not None:
                if other_depth < token_depth:
                    return False
            elif token not in other.token_set:
                return False
        return True

    def clear_match_cache(self) -> None:
        self._match_cache.clear()

    def match_stereotype(self, stereotype: Stereotype) -> bool:
        """Return True if any of the stereotype's labels is one of our tokens."""
        return any(
            normalize(label) in self.token_set for label in stereotype.multiple_labels
        )

    # --- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self.token_set == other.token_set

    def __hash__(self) -> int:
        return hash(self.token_set)

    def __str__(self) -> str:
        return f"{'.'.join(self.tokens)} {self.hierarchical}"

    # --- frequent use ---------------------------------------------------------

    @classmethod
    def activity(cls) -> Signature:
        return cls.of("root", "element", "activity_diagram", "activity")

    @classmethod
    def activity_diamond(cls) -> Signature:
        return cls.activity().add("diamond")

    @classmethod
    def activity_arrow(cls) -> Signature:
        return cls.activity().add("arrow")


def matches(query: Signature, candidate: Signature) -> bool:
    """Return True if *candidate*'s path satisfies the rule *query*."""
    return query.match_all(candidate)
