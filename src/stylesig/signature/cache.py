"""Per-signature memo of match results."""

from __future__ import annotations

from typing import Callable, Hashable


class MatchCache:
    """Maps a candidate signature to the boolean result of matching it.

    Concurrent first lookups may both compute the result; only finished
    values are stored and ``setdefault`` keeps whichever landed first.
    Since the computation is pure, both racers see the same answer.
    """

    def __init__(self) -> None:
        self._results: dict[Hashable, bool] = {}

    def get_or_compute(self, key: Hashable, compute: Callable[[], bool]) -> bool:
        result = self._results.get(key)
        if result is None:
            result = self._results.setdefault(key, compute())
        return result

    def clear(self) -> None:
        self._results.clear()

    def __len__(self) -> int:
        return len(self._results)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._results

    def __repr__(self) -> str:
        return f"MatchCache(entries={len(self._results)})"
