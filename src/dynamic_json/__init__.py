"""Forgiving navigation and type coercion over loosely-typed JSON."""

from __future__ import annotations

from dynamic_json.coercion import coerce, to_bool, to_datetime, to_float, to_int, to_str
from dynamic_json.config import ResolverSettings, load_resolver_settings
from dynamic_json.decoding import decode, decode_file
from dynamic_json.distance import levenshtein
from dynamic_json.errors import DecodeError, DynamicJsonError
from dynamic_json.keys import normalize_key
from dynamic_json.matching import KeyMatch, match_key
from dynamic_json.reporting import (
    CollectingReporter,
    KeyMatchEvent,
    LoggingReporter,
    MatchReporter,
    noop_reporter,
)
from dynamic_json.resolver import KeyResolver, lookup, resolve
from dynamic_json.value import NULL, Value, ValueKind

__all__ = [
    "NULL",
    "Value",
    "ValueKind",
    "decode",
    "decode_file",
    "normalize_key",
    "levenshtein",
    "KeyMatch",
    "match_key",
    "KeyResolver",
    "resolve",
    "lookup",
    "coerce",
    "to_bool",
    "to_int",
    "to_float",
    "to_str",
    "to_datetime",
    "MatchReporter",
    "noop_reporter",
    "LoggingReporter",
    "CollectingReporter",
    "KeyMatchEvent",
    "ResolverSettings",
    "load_resolver_settings",
    "DynamicJsonError",
    "DecodeError",
]
