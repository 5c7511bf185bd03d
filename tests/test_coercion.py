from __future__ import annotations

import math
from datetime import UTC, datetime

import pytest

from dynamic_json.coercion import coerce, to_bool, to_datetime, to_float, to_int, to_str
from dynamic_json.value import NULL, Value

_CONTAINERS = [Value.from_python({"a": 1}), Value.from_python([1]), NULL]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Value.string("1"), True),
        (Value.string("true"), True),
        (Value.string("YES"), True),
        (Value.string("On"), True),
        (Value.string("false"), False),
        (Value.string("off"), False),
        (Value.string("0"), None),
        (Value.string("maybe"), None),
        (Value.number(0), False),
        (Value.number(-2.5), True),
        (Value.number(math.nan), None),
        (Value.boolean(True), True),
        (Value.boolean(False), False),
    ],
)
def test_to_bool(value: Value, expected: bool | None) -> None:
    assert to_bool(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Value.string("25"), 25),
        (Value.string("-7"), -7),
        (Value.string("25.9"), 25),
        (Value.string("-25.9"), -25),
        (Value.string("1e3"), 1000),
        (Value.string("true"), 1),
        (Value.string("No"), 0),
        (Value.string(" 25"), None),
        (Value.string("1_000"), None),
        (Value.string("nan"), None),
        (Value.string("abc"), None),
        (Value.number(3.99), 3),
        (Value.number(-3.99), -3),
        (Value.number(math.inf), None),
        (Value.boolean(True), 1),
        (Value.boolean(False), 0),
    ],
)
def test_to_int(value: Value, expected: int | None) -> None:
    assert to_int(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Value.string("12.5"), 12.5),
        (Value.string("7"), 7.0),
        (Value.string(".5"), 0.5),
        (Value.string("yes"), 1.0),
        (Value.string("off"), 0.0),
        (Value.string("inf"), None),
        (Value.string("twelve"), None),
        (Value.number(3.5), 3.5),
        (Value.boolean(False), 0.0),
    ],
)
def test_to_float(value: Value, expected: float | None) -> None:
    assert to_float(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Value.string("premium"), "premium"),
        (Value.number(25), "25"),
        (Value.number(-0.0), "0"),
        (Value.number(3.5), "3.5"),
        (Value.number(0.1), "0.1"),
        (Value.boolean(True), "true"),
        (Value.boolean(False), "false"),
    ],
)
def test_to_str(value: Value, expected: str) -> None:
    assert to_str(value) == expected


@pytest.mark.parametrize("value", _CONTAINERS)
def test_containers_and_null_never_coerce(value: Value) -> None:
    assert to_bool(value) is None
    assert to_int(value) is None
    assert to_float(value) is None
    assert to_str(value) is None
    assert to_datetime(value) is None


def test_booleans_have_no_date() -> None:
    assert to_datetime(Value.boolean(True)) is None


@pytest.mark.parametrize("flag", [True, False])
def test_bool_survives_string_round_trip(flag: bool) -> None:
    text = to_str(Value.boolean(flag))

    assert text is not None
    assert to_bool(Value.string(text)) is flag


def test_coerce_dispatches_by_type_and_name() -> None:
    value = Value.string("25")

    assert coerce(value, int) == 25
    assert coerce(value, float) == 25.0
    assert coerce(value, str) == "25"
    assert coerce(value, "double") == 25.0
    assert coerce(value, "STRING") == "25"
    assert coerce(Value.string("on"), bool) is True
    assert coerce(Value.number(1704067200), datetime) == datetime(2024, 1, 1, tzinfo=UTC)
    assert coerce(Value.string("2024-01-01"), "date") == datetime(2024, 1, 1, tzinfo=UTC)


@pytest.mark.parametrize("target", [bytes, list, "uuid", object(), None])
def test_coerce_unknown_target_yields_none(target: object) -> None:
    assert coerce(Value.string("25"), target) is None  # type: ignore[arg-type]


def test_value_methods_delegate_to_engine() -> None:
    value = Value.string("12.5")

    assert value.as_float() == 12.5
    assert value.as_int() == 12
    assert value.as_str() == "12.5"
    assert value.as_bool() is None
    assert value.as_datetime() is None
    assert value.cast(float) == 12.5


def test_numeric_text_must_match_exactly() -> None:
    assert to_int(Value.string("25\n")) is None
    assert to_float(Value.string("12.5\n")) is None
    assert to_int(Value.string("٢٥")) is None


def test_very_long_digit_strings_stay_total() -> None:
    digits = Value.string("9" * 5000)

    assert to_int(digits) is None
    assert to_float(digits) == math.inf
