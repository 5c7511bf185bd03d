"""Calendar timestamp parsing for string and epoch inputs.

String inputs are tried against a fixed list of layouts, first success wins:

1. ISO-8601 with a zone designator (``2024-01-01T12:34:56Z``, optional
   fractional seconds, ``Z`` or a ``+HH:MM`` / ``+HHMM`` offset)
2. ``YYYY-MM-DD HH:MM:SS``
3. ``YYYY-MM-DD``
4. ``MM/DD/YYYY``
5. ``DD-MM-YYYY``

Layouts without a zone are read as UTC. Every result is an aware UTC datetime.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
MILLISECONDS_THRESHOLD = 1e12

_ISO_8601_RE = re.compile(
    r"(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<zone>Z|[+-]\d{2}:?\d{2})",
    re.IGNORECASE | re.ASCII,
)

_FALLBACK_LAYOUTS: tuple[str, ...] = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%m/%d/%Y",
    "%d-%m-%Y",
)


def _parse_zone(zone: str) -> timezone | None:
    if zone.upper() == "Z":
        return UTC
    digits = zone[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 23 or minutes > 59:
        return None
    offset = timedelta(hours=hours, minutes=minutes)
    return timezone(-offset if zone.startswith("-") else offset)


def _parse_iso_8601(text: str) -> datetime | None:
    match = _ISO_8601_RE.fullmatch(text)
    if match is None:
        return None
    zone = _parse_zone(match["zone"])
    if zone is None:
        return None
    try:
        parsed = datetime.strptime(f"{match['date']} {match['time']}", "%Y-%m-%d %H:%M:%S")
    except ValueError:
        return None
    fraction = match["fraction"]
    if fraction:
        parsed = parsed.replace(microsecond=int(fraction[:6].ljust(6, "0")))
    try:
        return parsed.replace(tzinfo=zone).astimezone(UTC)
    except OverflowError:
        return None


def parse_date_string(text: str) -> datetime | None:
    """Parse ``text`` with the supported layouts, or return None."""
    parsed = _parse_iso_8601(text)
    if parsed is not None:
        return parsed
    for layout in _FALLBACK_LAYOUTS:
        try:
            return datetime.strptime(text, layout).replace(tzinfo=UTC)
        except ValueError:
            continue
    return None


def parse_epoch(number: float) -> datetime | None:
    """Interpret ``number`` as epoch milliseconds above 1e12, else epoch seconds."""
    if not math.isfinite(number):
        return None
    seconds = number / 1000 if abs(number) > MILLISECONDS_THRESHOLD else number
    try:
        return EPOCH + timedelta(seconds=seconds)
    except OverflowError:
        return None


__all__ = [
    "EPOCH",
    "MILLISECONDS_THRESHOLD",
    "parse_date_string",
    "parse_epoch",
]
