"""jsonxml - convert JSON-like Python values to XML text.

Mapping keys become element names, list items repeat their parent key's tag,
and scalar values become element text.
"""

from jsonxml._version import __version__
from jsonxml.exceptions import JsonXmlError, TagNameError
from jsonxml.types import JsonType, classify
from jsonxml.tag_names import is_valid_tag_name, resolve_tag_name
from jsonxml.formatters import Formatter, CompactFormatter, IndentedFormatter
from jsonxml.options import DEFAULT_XML_HEADER, ConversionOptions, ResolvedOptions, resolve_options
from jsonxml.xml_encoder import json_to_xml, convert

__all__ = [
    "__version__",
    "json_to_xml",
    "convert",
    "ConversionOptions",
    "ResolvedOptions",
    "resolve_options",
    "DEFAULT_XML_HEADER",
    "JsonType",
    "classify",
    "Formatter",
    "CompactFormatter",
    "IndentedFormatter",
    "is_valid_tag_name",
    "resolve_tag_name",
    "JsonXmlError",
    "TagNameError",
]
