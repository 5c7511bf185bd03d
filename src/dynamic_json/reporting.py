"""Sinks for key substitutions made by the partial and fuzzy tiers."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

_LOGGER_NAME = "dynamic_json.matches"


class MatchReporter(Protocol):
    def __call__(self, original: str, matched: str) -> None: ...


def noop_reporter(original: str, matched: str) -> None:
    del original, matched


class LoggingReporter:
    """Emit one log record per substituted key."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        *,
        level: int | str = logging.WARNING,
    ) -> None:
        self._logger = logger or logging.getLogger(_LOGGER_NAME)
        self._level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self._level, int):
            raise ValueError(f"unknown log level {level!r}")

    def __call__(self, original: str, matched: str) -> None:
        self._logger.log(
            self._level,
            "key %r matched %r via partial/fuzzy lookup",
            original,
            matched,
            extra={"data": {"original": original, "matched": matched}},
        )


@dataclass(frozen=True, slots=True)
class KeyMatchEvent:
    original: str
    matched: str


class CollectingReporter:
    """Thread-safe in-memory record of reported matches."""

    def __init__(self) -> None:
        self._events: list[KeyMatchEvent] = []
        self._lock = threading.Lock()

    def __call__(self, original: str, matched: str) -> None:
        with self._lock:
            self._events.append(KeyMatchEvent(original=original, matched=matched))

    @property
    def events(self) -> tuple[KeyMatchEvent, ...]:
        with self._lock:
            return tuple(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


__all__ = [
    "MatchReporter",
    "noop_reporter",
    "LoggingReporter",
    "KeyMatchEvent",
    "CollectingReporter",
]
