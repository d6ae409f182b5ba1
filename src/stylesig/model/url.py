"""Clickable link attached to an element."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Url:
    url: str
    tooltip: str = ""
    label: str = ""

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("Url must be a non-empty string")
