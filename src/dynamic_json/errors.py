"""Exceptions raised at the decode boundary of the library."""

from __future__ import annotations


class DynamicJsonError(Exception):
    """Base class for dynamic-json failures."""


class DecodeError(DynamicJsonError, ValueError):
    """Raised when input text or bytes are not syntactically valid JSON."""


__all__ = [
    "DynamicJsonError",
    "DecodeError",
]
