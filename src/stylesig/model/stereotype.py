"""Stereotype values attached to diagram elements: ``<<Foo>> <<$bar>>``."""

from __future__ import annotations

import re
from dataclasses import dataclass

_GUILLEMET_RE = re.compile(r"<<\s*(?P<body>.*?)\s*>>")
_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Stereotype:
    """Labels and style names parsed from a stereotype.

    ``labels`` are the plain (unguilleted) labels; ``style_names`` come from
    ``<<$name>>`` entries.
    """

    labels: tuple[str, ...] = ()
    style_names: tuple[str, ...] = ()

    @classmethod
    def parse(cls, source: str) -> Stereotype:
        labels: list[str] = []
        style_names: list[str] = []
        for match in _GUILLEMET_RE.finditer(source):
            body = match.group("body")
            if not body:
                continue
            if body.startswith("$"):
                style_names.extend(n for n in _SPLIT_RE.split(body[1:]) if n)
            else:
                labels.append(body)
        return cls(labels=tuple(labels), style_names=tuple(style_names))

    @property
    def multiple_labels(self) -> tuple[str, ...]:
        """Each word of every label in selector form: ``<<a b>>`` yields ``.a`` and ``.b``."""
        result: list[str] = []
        for label in self.labels:
            result.extend("." + part for part in _SPLIT_RE.split(label) if part)
        return tuple(result)

    @property
    def stereostyles(self) -> Stereostyles:
        return Stereostyles(self.style_names)

    def __str__(self) -> str:
        parts = [f"<<{label}>>" for label in self.labels]
        parts.extend(f"<<${name}>>" for name in self.style_names)
        return "".join(parts)


@dataclass(frozen=True)
class Stereostyles:
    """Ordered style names taken from a stereotype."""

    style_names: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.style_names
