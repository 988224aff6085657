"""Core data types for jsonxml."""

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any


class JsonType(Enum):
    """The six kinds of JSON value."""
    NULL = "null"
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"


def classify(value: Any) -> JsonType:
    """Return the JSON kind of a Python value.

    Args:
        value: A JSON-like value (None, bool, int, float, Decimal, str,
            a mapping or a list/tuple)

    Returns:
        Exactly one JsonType member

    Raises:
        TypeError: If the value is not a JSON-like type

    Example:
        >>> classify({"a": 1})
        <JsonType.OBJECT: 'object'>
        >>> classify(True)
        <JsonType.BOOLEAN: 'boolean'>
    """
    if value is None:
        return JsonType.NULL

    # bool is an int subclass, check it first
    elif isinstance(value, bool):
        return JsonType.BOOLEAN

    elif isinstance(value, (int, float, Decimal)):
        return JsonType.NUMBER

    elif isinstance(value, str):
        return JsonType.STRING

    elif isinstance(value, Mapping):
        return JsonType.OBJECT

    elif isinstance(value, (list, tuple)):
        return JsonType.ARRAY

    raise TypeError(f"Expected a JSON-like value, got {type(value)}")
