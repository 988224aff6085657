"""Formatting strategies that wrap converted fragments in XML tags."""

from dataclasses import dataclass

from jsonxml.tag_names import resolve_tag_name
from jsonxml.types import JsonType


@dataclass(frozen=True)
class Formatter:
    """Base class for tag-wrapping strategies.

    A formatter is built once per conversion and applied to every fragment
    the converter produces.

    Attributes:
        attempt_bad_name_fix: Whether invalid tag names are retried with an
            underscore prefix
    """
    attempt_bad_name_fix: bool = False

    def format(self, out: str, tag: str | None, json_type: JsonType, depth: int) -> str:
        """Wrap out in tag, or return it unchanged when tag is None.

        Args:
            out: The already converted content
            tag: Tag name to wrap with, None for no wrapping
            json_type: Kind of the value out was produced from
            depth: Nesting level of the element (1 for the first level)

        Raises:
            TagNameError: If tag is not a usable XML name
        """
        if tag is None:
            return out
        name = resolve_tag_name(tag, self.attempt_bad_name_fix)
        return self._wrap(out, name, json_type, depth)

    def _wrap(self, out: str, name: str, json_type: JsonType, depth: int) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class CompactFormatter(Formatter):
    """Emit tags with no whitespace between them."""

    def _wrap(self, out: str, name: str, json_type: JsonType, depth: int) -> str:
        return f"<{name}>{out}</{name}>"


@dataclass(frozen=True)
class IndentedFormatter(Formatter):
    """Emit one element per line, indented by depth.

    Attributes:
        unit: String repeated once per nesting level
    """
    unit: str = "\t"

    def _wrap(self, out: str, name: str, json_type: JsonType, depth: int) -> str:
        pad = self.unit * (depth - 1)

        # Children already end with a newline and carry their own indent
        if json_type is JsonType.OBJECT:
            return f"{pad}<{name}>\n{out}{pad}</{name}>\n"
        return f"{pad}<{name}>{out}</{name}>\n"
