"""Conversion options and their resolution into per-call directives."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jsonxml.formatters import CompactFormatter, Formatter, IndentedFormatter

logger = logging.getLogger(__name__)

DEFAULT_XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no" ?>'
DEFAULT_INDENT = "\t"


class ConversionOptions(BaseModel):
    """User-facing options for json_to_xml.

    Example:
        >>> ConversionOptions(header=True, indent="  ").indent
        '  '
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    header: bool | str = Field(
        default=False,
        description="True for the default XML declaration, a string for a custom header line",
    )
    root: str | None = Field(
        default=None,
        description="Tag wrapping the whole document",
    )
    indent: bool | str = Field(
        default=False,
        description="True to pretty-print with tabs, a string to pretty-print with that unit",
    )
    attempt_bad_name_fix: bool = Field(
        default=False,
        description="Retry invalid tag names with an underscore prefix",
    )


@dataclass(frozen=True)
class ResolvedOptions:
    """Concrete directives for a single conversion.

    Attributes:
        header_text: Literal text prepended to the output
        root: Tag wrapping the whole document, or None
        start_depth: Recursion depth the converter starts at
        formatter: Strategy used to wrap every element
    """
    header_text: str
    root: str | None
    start_depth: int
    formatter: Formatter


def resolve_options(
    options: ConversionOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ResolvedOptions:
    """Normalize raw options into ResolvedOptions.

    Args:
        options: A ConversionOptions instance, a mapping of option names, or None
        **overrides: Option names that take precedence over options

    Returns:
        ResolvedOptions for one call

    Raises:
        pydantic.ValidationError: If an option is unknown or has the wrong type
    """
    if options is None:
        options = {}
    elif isinstance(options, ConversionOptions):
        options = options.model_dump(exclude_unset=True)
    opts = ConversionOptions.model_validate({**options, **overrides})

    if opts.header is True:
        header_text = DEFAULT_XML_HEADER
    elif opts.header:
        header_text = opts.header
    else:
        header_text = ""

    if opts.root:
        root, start_depth = opts.root, 1
    else:
        root, start_depth = None, 0

    if opts.indent:
        unit = DEFAULT_INDENT if opts.indent is True else opts.indent
        formatter = IndentedFormatter(attempt_bad_name_fix=opts.attempt_bad_name_fix, unit=unit)
        if header_text:
            header_text += "\n"
    else:
        formatter = CompactFormatter(attempt_bad_name_fix=opts.attempt_bad_name_fix)

    logger.debug(
        "Resolved options: header=%r root=%r formatter=%r",
        header_text, root, formatter,
    )
    return ResolvedOptions(
        header_text=header_text,
        root=root,
        start_depth=start_depth,
        formatter=formatter,
    )
