"""Convert JSON-like values to XML strings."""

import math
from collections.abc import Mapping
from typing import Any

from jsonxml.options import ConversionOptions, resolve_options
from jsonxml.formatters import Formatter
from jsonxml.types import JsonType, classify


def json_to_xml(
    value: Any,
    options: ConversionOptions | Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> str:
    """Convert a JSON-like value to an XML string.

    Mapping keys become element names, in iteration order. Each item of a
    list is wrapped in the tag of the key holding the list. String values
    are emitted verbatim, without entity escaping.

    Args:
        value: The value to convert (dict, list, str, number, bool or None)
        options: A ConversionOptions instance or a mapping of option names
        **kwargs: Option names (header, root, indent, attempt_bad_name_fix),
            overriding those in options

    Returns:
        The XML string, prefixed with the header text if one was requested

    Raises:
        TagNameError: If a key cannot be used as an XML tag
        pydantic.ValidationError: If the options are invalid

    Example:
        >>> json_to_xml({"a": [1, 2, 3]})
        '<a>1</a><a>2</a><a>3</a>'
        >>> print(json_to_xml({"a": {"b": "x"}}, indent="  "), end="")
        <a>
          <b>x</b>
        </a>
    """
    resolved = resolve_options(options, **kwargs)
    body = convert(value, resolved.root, resolved.start_depth, resolved.formatter)
    return resolved.header_text + body


def convert(value: Any, wrap_tag: str | None, depth: int, formatter: Formatter) -> str:
    """Recursively convert value and wrap it with formatter.

    Args:
        value: The value to convert
        wrap_tag: Tag the result should be wrapped with, None for none
        depth: Nesting level, used for indentation
        formatter: Strategy applied to every produced fragment

    Returns:
        The XML fragment for value
    """
    json_type = classify(value)

    if json_type is JsonType.NULL:
        out = "null"

    elif json_type is JsonType.STRING:
        out = value

    elif json_type is JsonType.BOOLEAN:
        out = "true" if value else "false"

    elif json_type is JsonType.NUMBER:
        out = _number_text(value)

    elif json_type is JsonType.OBJECT:
        out = "".join(
            convert(child, key, depth + 1, formatter)
            for key, child in value.items()
        )

    else:
        wrap_tag, out = _convert_array(value, wrap_tag, depth, formatter)

    return formatter.format(out, wrap_tag, json_type, depth)


def _convert_array(
    items: Any,
    wrap_tag: str | None,
    depth: int,
    formatter: Formatter,
) -> tuple[None, str]:
    """Wrap each item with the array's tag; the array itself gets no tag."""
    out = "".join(convert(item, wrap_tag, depth, formatter) for item in items)
    return None, out


def _number_text(value) -> str:
    """Render a number the way JSON writes it."""
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    return str(value)
