from __future__ import annotations

import pytest

from dynamic_json.distance import levenshtein


@pytest.mark.parametrize(
    ("source", "target", "expected"),
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("café", "cafe", 1),
        ("newui", "new_ui", 1),
        ("same", "same", 0),
    ],
)
def test_levenshtein_known_distances(source: str, target: str, expected: int) -> None:
    assert levenshtein(source, target) == expected


@pytest.mark.parametrize(("a", "b"), [("kitten", "sitting"), ("", "x"), ("launch_date", "lunch")])
def test_levenshtein_is_symmetric(a: str, b: str) -> None:
    assert levenshtein(a, b) == levenshtein(b, a)


def test_levenshtein_handles_long_inputs() -> None:
    long_key = "segment_" * 200

    assert levenshtein(long_key, long_key + "x") == 1
    assert levenshtein(long_key, "") == len(long_key)
