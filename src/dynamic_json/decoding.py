"""Decode boundary: JSON text or bytes in, `Value` tree out."""

from __future__ import annotations

import json
import logging
from os import PathLike

from dynamic_json.errors import DecodeError
from dynamic_json.value import Value

logger = logging.getLogger(__name__)


def decode(data: str | bytes | bytearray) -> Value:
    """Parse a complete JSON document into a `Value`.

    Integers are read straight into floats, so out-of-range literals become
    infinities instead of failing. Malformed input, or nesting deeper than the
    tokenizer supports, raises `DecodeError`.
    """
    try:
        parsed = json.loads(data, parse_int=float)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.debug(
            "json decode failed",
            extra={"data": {"error": str(exc), "length": len(data)}},
        )
        raise DecodeError(f"invalid JSON document: {exc}") from exc
    except RecursionError as exc:
        logger.debug("json nesting too deep", extra={"data": {"length": len(data)}})
        raise DecodeError("JSON document is nested too deeply to decode") from exc
    return Value.from_python(parsed)


def decode_file(path: str | PathLike[str], *, encoding: str = "utf-8") -> Value:
    """Read and decode the JSON document at ``path``."""
    with open(path, "rb") as handle:
        raw = handle.read()
    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"{path}: not valid {encoding}: {exc}") from exc
    return decode(text)


__all__ = ["decode", "decode_file"]
