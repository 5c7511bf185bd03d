"""Rule table turning any `Value` into a Python scalar.

Every function here is total: an input that cannot be interpreted as the
requested type yields None instead of raising.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from dynamic_json.dates import parse_date_string, parse_epoch

if TYPE_CHECKING:  # pragma: no cover - type hints only
    from dynamic_json.value import Value

TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
FALSE_WORDS = frozenset({"false", "no", "off"})
_TRUE_FLAG_WORDS = TRUE_WORDS - {"1"}

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_integer(text: str) -> int | None:
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:  # exceeds the interpreter's int digit limit
        return None


def _parse_float(text: str) -> float | None:
    if _FLOAT_RE.fullmatch(text) is None:
        return None
    return float(text)


def _word_flag(text: str) -> int | None:
    lowered = text.lower()
    if lowered in _TRUE_FLAG_WORDS:
        return 1
    if lowered in FALSE_WORDS:
        return 0
    return None


def _truncate(number: float) -> int | None:
    if not math.isfinite(number):
        return None
    return int(number)


def to_bool(value: Value) -> bool | None:
    if value.kind == "bool":
        return value.payload
    if value.kind == "number":
        if math.isnan(value.payload):
            return None
        return value.payload != 0
    if value.kind == "string":
        lowered = value.payload.lower()
        if lowered in TRUE_WORDS:
            return True
        if lowered in FALSE_WORDS:
            return False
    return None


def to_int(value: Value) -> int | None:
    if value.kind == "number":
        return _truncate(value.payload)
    if value.kind == "bool":
        return 1 if value.payload else 0
    if value.kind == "string":
        text = value.payload
        parsed = _parse_integer(text)
        if parsed is not None:
            return parsed
        as_float = _parse_float(text)
        if as_float is not None:
            return _truncate(as_float)
        return _word_flag(text)
    return None


def to_float(value: Value) -> float | None:
    if value.kind == "number":
        return value.payload
    if value.kind == "bool":
        return 1.0 if value.payload else 0.0
    if value.kind == "string":
        text = value.payload
        parsed = _parse_float(text)
        if parsed is not None:
            return parsed
        as_int = _parse_integer(text)
        if as_int is not None:
            return float(as_int)
        flag = _word_flag(text)
        return None if flag is None else float(flag)
    return None


def to_str(value: Value) -> str | None:
    if value.kind == "string":
        return value.payload
    if value.kind == "number":
        number = value.payload
        if number.is_integer():
            return str(int(number))
        return repr(number)
    if value.kind == "bool":
        return "true" if value.payload else "false"
    return None


def to_datetime(value: Value) -> datetime | None:
    if value.kind == "string":
        return parse_date_string(value.payload)
    if value.kind == "number":
        return parse_epoch(value.payload)
    return None


_BY_TYPE: dict[type, Callable[[Value], object]] = {
    bool: to_bool,
    int: to_int,
    float: to_float,
    str: to_str,
    datetime: to_datetime,
}

_BY_NAME: dict[str, Callable[[Value], object]] = {
    "bool": to_bool,
    "int": to_int,
    "double": to_float,
    "float": to_float,
    "string": to_str,
    "str": to_str,
    "date": to_datetime,
    "datetime": to_datetime,
}


def coerce(value: Value, target: type | str) -> object | None:
    """Route ``value`` to the coercion for ``target``.

    ``target`` is one of ``bool``, ``int``, ``float``, ``str``, ``datetime`` or
    the matching kind name (``"double"``, ``"string"`` and ``"date"`` included).
    Anything else yields None.
    """
    if isinstance(target, str):
        converter = _BY_NAME.get(target.lower())
    elif isinstance(target, type):
        converter = _BY_TYPE.get(target)
    else:
        converter = None
    if converter is None:
        return None
    return converter(value)


__all__ = [
    "TRUE_WORDS",
    "FALSE_WORDS",
    "to_bool",
    "to_int",
    "to_float",
    "to_str",
    "to_datetime",
    "coerce",
]
