"""Immutable value tree built from decoded JSON."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal, TypeAlias

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import TypeAliasType

from dynamic_json import coercion
from dynamic_json.keys import normalize_key

ValueKind = Literal["object", "array", "string", "number", "bool", "null"]

if TYPE_CHECKING:
    PlainJson: TypeAlias = str | float | bool | None | list["PlainJson"] | dict[str, "PlainJson"]
else:
    PlainJson = TypeAliasType(
        "PlainJson",
        str | float | bool | None | list["PlainJson"] | dict[str, "PlainJson"],
    )


def _as_float(number: int | float) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


_SCALAR_PAYLOADS: dict[str, type] = {
    "string": str,
    "number": float,
    "bool": bool,
    "null": type(None),
}
_CONTAINER_KINDS = frozenset({"object", "array"})


@dataclass(frozen=True, slots=True, repr=False)
class Value:
    """One node of a decoded JSON document.

    Object keys are stored normalized (see `normalize_key`); when two raw keys
    normalize to the same spelling the last one decoded wins. Null stands for
    both an explicit JSON ``null`` and a lookup that found nothing.
    """

    kind: ValueKind
    payload: Any = None

    def __post_init__(self) -> None:
        if self.kind not in _SCALAR_PAYLOADS and self.kind not in _CONTAINER_KINDS:
            raise ValueError(f"unknown value kind {self.kind!r}")
        if self.kind == "object":
            _check_entries(self.payload)
        elif self.kind == "array":
            _check_items(self.payload)
        elif not isinstance(self.payload, _SCALAR_PAYLOADS[self.kind]):
            expected = _SCALAR_PAYLOADS[self.kind].__name__
            raise TypeError(f"{self.kind} payload must be {expected}, got {type(self.payload).__name__}")

    def __hash__(self) -> int:
        if self.kind == "object":
            return hash((self.kind, frozenset(self.payload.items())))
        return hash((self.kind, self.payload))

    # --- Construction ---
    @classmethod
    def null(cls) -> Value:
        return NULL

    @classmethod
    def string(cls, text: str) -> Value:
        return cls("string", text)

    @classmethod
    def number(cls, number: int | float) -> Value:
        return cls("number", _as_float(number))

    @classmethod
    def boolean(cls, flag: bool) -> Value:
        return cls("bool", bool(flag))

    @classmethod
    def from_items(cls, items: Iterable[object]) -> Value:
        return _build(_Pending.for_items(items))

    @classmethod
    def from_mapping(cls, entries: Mapping[object, object]) -> Value:
        return _build(_Pending.for_mapping(entries))

    @classmethod
    def from_python(cls, node: object) -> Value:
        """Build a value from a decoded JSON tree.

        Unrecognized node types become Null rather than failing. Nesting depth
        is bounded only by memory; containers are walked with an explicit stack.
        """
        leaf = _leaf(node)
        if leaf is not None:
            return leaf
        return _build(_Pending.open(node))

    def to_python(self) -> PlainJson:
        """Return the plain JSON tree (normalized keys, float numbers)."""
        root = _plain_shell(self)
        stack: list[tuple[Value, Any]] = [(self, root)]
        while stack:
            value, target = stack.pop()
            if value.kind == "object":
                for key, child in value.payload.items():
                    target[key] = shell = _plain_shell(child)
                    if child.kind in _CONTAINER_KINDS:
                        stack.append((child, shell))
            elif value.kind == "array":
                for child in value.payload:
                    shell = _plain_shell(child)
                    target.append(shell)
                    if child.kind in _CONTAINER_KINDS:
                        stack.append((child, shell))
        return root

    # --- Structure ---
    @property
    def is_null(self) -> bool:
        return self.kind == "null"

    def as_object(self) -> Mapping[str, Value] | None:
        return self.payload if self.kind == "object" else None

    def as_array(self) -> tuple[Value, ...] | None:
        return self.payload if self.kind == "array" else None

    # --- Navigation ---
    def get(self, key: str) -> Value:
        """Resolve one key against this value's own entries, without dot splitting."""
        from dynamic_json.resolver import DEFAULT_RESOLVER

        return DEFAULT_RESOLVER.lookup(self, key)

    def path(self, path: str) -> Value:
        """Resolve a dot-delimited path starting at this value."""
        from dynamic_json.resolver import DEFAULT_RESOLVER

        return DEFAULT_RESOLVER.resolve(self, path)

    def __getitem__(self, selector: str | int) -> Value:
        if isinstance(selector, int) and not isinstance(selector, bool):
            if self.kind != "array" or not -len(self.payload) <= selector < len(self.payload):
                return NULL
            return self.payload[selector]
        if isinstance(selector, str):
            return self.path(selector)
        return NULL

    # --- Coercion ---
    def as_bool(self) -> bool | None:
        return coercion.to_bool(self)

    def as_int(self) -> int | None:
        return coercion.to_int(self)

    def as_float(self) -> float | None:
        return coercion.to_float(self)

    def as_str(self) -> str | None:
        return coercion.to_str(self)

    def as_datetime(self) -> datetime | None:
        return coercion.to_datetime(self)

    def cast(self, target: type | str) -> object | None:
        return coercion.coerce(self, target)

    # --- pydantic ---
    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: object,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_python,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_python(),
            ),
        )

    def __repr__(self) -> str:
        if self.kind == "null":
            return "Value(null)"
        if self.kind == "object":
            return f"Value(object, {dict(self.payload)!r})"
        return f"Value({self.kind}, {self.payload!r})"


def _check_entries(payload: object) -> None:
    if not isinstance(payload, MappingProxyType):
        raise TypeError(f"object payload must be a MappingProxyType, got {type(payload).__name__}")
    for key, child in payload.items():
        if not isinstance(key, str) or normalize_key(key) != key:
            raise ValueError(f"object key {key!r} is not normalized")
        if not isinstance(child, Value):
            raise TypeError(f"object entry {key!r} must be a Value")


def _check_items(payload: object) -> None:
    if not isinstance(payload, tuple):
        raise TypeError(f"array payload must be a tuple, got {type(payload).__name__}")
    for child in payload:
        if not isinstance(child, Value):
            raise TypeError("array items must be Values")


def _leaf(node: object) -> Value | None:
    """Return the value for a non-container node, or None for a container."""
    if isinstance(node, Value):
        return node
    if node is None:
        return NULL
    if isinstance(node, bool):
        return Value.boolean(node)
    if isinstance(node, (int, float)):
        return Value.number(node)
    if isinstance(node, str):
        return Value.string(node)
    if isinstance(node, (Mapping, list, tuple)):
        return None
    return NULL


@dataclass(slots=True)
class _Pending:
    """Container whose children are still being built."""

    is_object: bool
    entries: Iterator[tuple[object, object]]
    slot: object = None
    built: list[tuple[object, Value]] = field(default_factory=list)

    @classmethod
    def for_mapping(cls, entries: Mapping[object, object], slot: object = None) -> _Pending:
        return cls(True, iter(entries.items()), slot)

    @classmethod
    def for_items(cls, items: Iterable[object], slot: object = None) -> _Pending:
        return cls(False, ((None, item) for item in items), slot)

    @classmethod
    def open(cls, node: object, slot: object = None) -> _Pending:
        if isinstance(node, Mapping):
            return cls.for_mapping(node, slot)
        return cls.for_items(node, slot)  # type: ignore[arg-type]

    def close(self) -> Value:
        if not self.is_object:
            return Value("array", tuple(child for _, child in self.built))
        normalized: dict[str, Value] = {}
        for raw_key, child in self.built:
            normalized[normalize_key(str(raw_key))] = child
        return Value("object", MappingProxyType(normalized))


def _build(root: _Pending) -> Value:
    stack = [root]
    while True:
        frame = stack[-1]
        for slot, child in frame.entries:
            leaf = _leaf(child)
            if leaf is None:
                stack.append(_Pending.open(child, slot))
                break
            frame.built.append((slot, leaf))
        else:
            stack.pop()
            done = frame.close()
            if not stack:
                return done
            stack[-1].built.append((frame.slot, done))


def _plain_shell(value: Value) -> Any:
    if value.kind == "object":
        return {}
    if value.kind == "array":
        return []
    return value.payload


NULL = Value("null")


__all__ = ["NULL", "PlainJson", "Value", "ValueKind"]
