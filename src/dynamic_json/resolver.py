"""Dot-path and single-key navigation over `Value` trees."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dynamic_json.matching import DEFAULT_MAX_DISTANCE, match_key
from dynamic_json.reporting import LoggingReporter, MatchReporter, noop_reporter
from dynamic_json.value import NULL, Value

if TYPE_CHECKING:  # pragma: no cover - type hints only
    from dynamic_json.config import ResolverSettings

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."


class KeyResolver:
    """Resolve keys and paths with exact, partial and fuzzy matching.

    Resolution never raises: a missing key, a non-object step or an exhausted
    path all produce Null. Partial and fuzzy substitutions are passed to the
    reporter as ``(original_segment, matched_key)``.
    """

    def __init__(
        self,
        *,
        max_distance: int = DEFAULT_MAX_DISTANCE,
        reporter: MatchReporter | None = None,
    ) -> None:
        if isinstance(max_distance, bool) or not isinstance(max_distance, int):
            raise TypeError("max_distance must be an integer")
        if max_distance < 0:
            raise ValueError("max_distance must be non-negative")
        self._max_distance = max_distance
        self._reporter = reporter or noop_reporter

    @classmethod
    def from_settings(cls, settings: ResolverSettings) -> KeyResolver:
        reporter: MatchReporter | None = None
        if settings.report_matches:
            reporter = LoggingReporter(level=settings.match_log_level)
        return cls(max_distance=settings.max_fuzzy_distance, reporter=reporter)

    @property
    def max_distance(self) -> int:
        return self._max_distance

    def lookup(self, value: Value, key: str) -> Value:
        """Resolve ``key`` against the entries of ``value`` itself."""
        entries = value.as_object()
        if entries is None:
            return NULL
        match = match_key(entries.keys(), key, max_distance=self._max_distance)
        if match is None:
            logger.debug("key lookup missed", extra={"data": {"key": key}})
            return NULL
        if not match.is_exact:
            self._reporter(key, match.key)
        return entries[match.key]

    def resolve(self, root: Value, path: str) -> Value:
        """Walk ``path`` segment by segment starting at ``root``."""
        current = root
        for segment in path.split(PATH_SEPARATOR):
            if not segment:
                continue
            current = self.lookup(current, segment)
            if current.is_null:
                return NULL
        return current


DEFAULT_RESOLVER = KeyResolver()


def resolve(
    root: Value,
    path: str,
    *,
    reporter: MatchReporter | None = None,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> Value:
    return KeyResolver(max_distance=max_distance, reporter=reporter).resolve(root, path)


def lookup(
    value: Value,
    key: str,
    *,
    reporter: MatchReporter | None = None,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> Value:
    return KeyResolver(max_distance=max_distance, reporter=reporter).lookup(value, key)


__all__ = [
    "PATH_SEPARATOR",
    "KeyResolver",
    "DEFAULT_RESOLVER",
    "resolve",
    "lookup",
]
