"""Key normalization shared by value construction and lookups.

Keys are folded into a single lowercase, underscore-delimited spelling so that
``betaFeatureX``, ``BETA-FEATURE-X`` and ``beta feature x`` all address the same
entry. An all-caps run such as ``FEATURETOGGLE`` carries no boundary signal and
is only lowercased.
"""

from __future__ import annotations

import re

_CASE_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_DELIMITER_RE = re.compile(r"[\s_\-]+")

KEY_DELIMITER = "_"


def normalize_key(raw: str) -> str:
    """Return the canonical spelling of ``raw``."""
    split = _CASE_BOUNDARY_RE.sub(KEY_DELIMITER, raw)
    segments = (segment.lower() for segment in _DELIMITER_RE.split(split) if segment)
    return KEY_DELIMITER.join(segments)


__all__ = ["KEY_DELIMITER", "normalize_key"]
