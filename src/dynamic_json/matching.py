"""Single-level key matching: exact, then partial containment, then fuzzy."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Literal

from dynamic_json.distance import levenshtein
from dynamic_json.keys import normalize_key

MatchTier = Literal["exact", "partial", "fuzzy"]

DEFAULT_MAX_DISTANCE = 2


@dataclass(frozen=True, slots=True)
class KeyMatch:
    """Stored key selected for a lookup segment."""

    key: str
    tier: MatchTier
    distance: int = 0

    @property
    def is_exact(self) -> bool:
        return self.tier == "exact"


def match_key(
    keys: Collection[str],
    segment: str,
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> KeyMatch | None:
    """Pick the stored key that best answers ``segment``.

    ``keys`` are expected to be normalized already and are scanned in their
    iteration order, which decides partial matches and ties between equally
    distant fuzzy candidates. ``segment`` is normalized here.
    """
    normalized = normalize_key(segment)
    if normalized in keys:
        return KeyMatch(key=normalized, tier="exact")

    for key in keys:
        if normalized in key:
            return KeyMatch(key=key, tier="partial", distance=len(key) - len(normalized))

    best: KeyMatch | None = None
    for key in keys:
        distance = levenshtein(normalized, key)
        if distance > max_distance:
            continue
        if best is None or distance < best.distance:
            best = KeyMatch(key=key, tier="fuzzy", distance=distance)
    return best


__all__ = ["DEFAULT_MAX_DISTANCE", "KeyMatch", "MatchTier", "match_key"]
