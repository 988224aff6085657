"""Tests for JSON type classification."""

from collections import OrderedDict
from decimal import Decimal

import pytest
from jsonxml.types import JsonType, classify


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, JsonType.NULL),
        ("", JsonType.STRING),
        ("hello", JsonType.STRING),
        (True, JsonType.BOOLEAN),
        (False, JsonType.BOOLEAN),
        (0, JsonType.NUMBER),
        (3.5, JsonType.NUMBER),
        (Decimal("1.10"), JsonType.NUMBER),
        ({}, JsonType.OBJECT),
        (OrderedDict(a=1), JsonType.OBJECT),
        ([], JsonType.ARRAY),
        ((1, 2), JsonType.ARRAY),
    ],
)
def test_classify(value, expected):
    """Test every JSON kind is classified."""
    assert classify(value) is expected


def test_bool_is_not_number():
    """Test booleans are not classified as numbers."""
    assert classify(True) is not JsonType.NUMBER


def test_string_is_not_array():
    """Test strings are not treated as sequences."""
    assert classify("abc") is JsonType.STRING


def test_unsupported_type_raises():
    """Test that non-JSON values raise TypeError."""
    with pytest.raises(TypeError, match="Expected a JSON-like value"):
        classify(object())

    with pytest.raises(TypeError):
        classify({1, 2})


def test_json_type_values():
    """Test JsonType member values."""
    assert {t.value for t in JsonType} == {
        "null", "string", "boolean", "number", "object", "array",
    }
