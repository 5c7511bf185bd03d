from __future__ import annotations

import json
import math
from pathlib import Path

import pytest

from dynamic_json.decoding import decode, decode_file
from dynamic_json.errors import DecodeError, DynamicJsonError


def test_decode_accepts_text_and_bytes() -> None:
    assert decode('{"maxItems": 3}').get("max_items").as_int() == 3
    assert decode(b'{"maxItems": 3}').get("max_items").as_int() == 3
    assert decode(bytearray(b"[true]"))[0].as_bool() is True


def test_decode_reads_integers_as_floats() -> None:
    document = decode("[1, 2.5, " + "9" * 400 + "]")

    assert document[0].payload == 1.0
    assert isinstance(document[0].payload, float)
    assert document[2].as_float() == math.inf


def test_decode_rejects_malformed_json() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode('{"flags": ')

    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, DynamicJsonError)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_decode_rejects_invalid_utf8() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode(b'"\xff"')

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_decode_non_finite_literals_coerce_softly() -> None:
    document = decode('{"ratio": NaN}')

    assert document.get("ratio").as_bool() is None
    assert document.get("ratio").as_int() is None


def test_decode_file_reads_document(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text('{"Feature Toggle": "yes"}', encoding="utf-8")

    assert decode_file(path).get("featureToggle").as_bool() is True


def test_decode_file_reports_bad_encoding(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b'{"a": "\xff"}')

    with pytest.raises(DecodeError):
        decode_file(path)


def test_decode_file_propagates_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        decode_file(tmp_path / "missing.json")


def test_decode_builds_nested_documents_the_tokenizer_accepts() -> None:
    depth = 600
    arrays = decode("[" * depth + "1" + "]" * depth)
    objects = decode('{"a":' * depth + "1" + "}" * depth)

    current = arrays
    for _ in range(depth):
        current = current[0]
    assert current.as_int() == 1
    assert objects.path(".".join(["a"] * depth)).as_int() == 1


def test_decode_reports_nesting_beyond_the_tokenizer_as_decode_error() -> None:
    depth = 200_000

    with pytest.raises(DecodeError) as excinfo:
        decode("[" * depth + "]" * depth)

    assert isinstance(excinfo.value.__cause__, RecursionError)
