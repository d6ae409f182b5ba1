"""Token normalization shared by every signature entry point."""

from __future__ import annotations

from enum import Enum

__all__ = [
    "STAR",
    "STEREOTYPE_PREFIX",
    "CLICKABLE",
    "STEREOTYPE",
    "SEPARATOR",
    "normalize",
    "normalize_name",
]

STAR = "*"

# Marks tokens that come from a stereotype label or a ".name" selector.
STEREOTYPE_PREFIX = "«"

SEPARATOR = "."

CLICKABLE = "clickable"
STEREOTYPE = "stereotype"


def normalize(raw: str) -> str:
    """Return the stored form of a raw token.

    A leading separator is turned into the stereotype prefix first, so
    ``.foo`` and ``foo`` stay distinct once the separators are stripped.
    """
    if raw.startswith(SEPARATOR):
        raw = STEREOTYPE_PREFIX + raw
    return raw.lower().replace("_", "").replace(SEPARATOR, "")


def normalize_name(name: str | Enum) -> str:
    """Normalize an enumerated style name: ``ACTIVITY_DIAGRAM`` -> ``activitydiagram``."""
    if isinstance(name, Enum):
        name = name.name
    return name.lower().replace("_", "")
