"""Levenshtein edit distance used by the fuzzy key tier."""

from __future__ import annotations


def levenshtein(source: str, target: str) -> int:
    """Return the number of single-character edits turning ``source`` into ``target``.

    Insertions, deletions and substitutions all cost one. Only two rows sized to
    the shorter string are kept alive.
    """
    if source == target:
        return 0
    if len(source) < len(target):
        source, target = target, source
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    current = [0] * (len(target) + 1)
    for i, source_char in enumerate(source, start=1):
        current[0] = i
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current[j] = min(
                current[j - 1] + 1,
                previous[j] + 1,
                previous[j - 1] + cost,
            )
        previous, current = current, previous
    return previous[len(target)]


__all__ = ["levenshtein"]
