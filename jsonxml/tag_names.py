"""XML element name validation."""

import logging
import re

from jsonxml.exceptions import TagNameError

logger = logging.getLogger(__name__)

# NameStartChar and NameChar from the XML 1.0 Name production
_NAME_START_CHARS = (
    ":A-Z_a-z"
    "\xC0-\xD6"
    "\xD8-\xF6"
    "\xF8-\u02FF"
    "\u0370-\u037D"
    "\u037F-\u1FFF"
    "\u200C-\u200D"
    "\u2070-\u218F"
    "\u2C00-\u2FEF"
    "\u3001-\uD7FF"
    "\uF900-\uFDCF"
    "\uFDF0-\uFFFD"
    "\U00010000-\U000EFFFF"
)
_NAME_CHARS = _NAME_START_CHARS + "\\-.0-9\xB7\u0300-\u036F\u203F-\u2040"

VALID_TAG_NAME = re.compile(f"[{_NAME_START_CHARS}][{_NAME_CHARS}]*")


def is_valid_tag_name(name) -> bool:
    """Return True if name matches the XML ``Name`` production.

    >>> is_valid_tag_name("ab.-dc")
    True
    >>> is_valid_tag_name("1bad")
    False
    """
    if not isinstance(name, str):
        return False
    return VALID_TAG_NAME.fullmatch(name) is not None


def resolve_tag_name(name: str, attempt_bad_name_fix: bool = False) -> str:
    """Turn a key into a usable XML element name.

    Args:
        name: The candidate tag name
        attempt_bad_name_fix: Whether to retry an invalid name with an
            underscore prefix

    Returns:
        The name itself, or its underscore-prefixed form

    Raises:
        TagNameError: If no valid name can be produced
    """
    if is_valid_tag_name(name):
        return name

    if attempt_bad_name_fix:
        fixed = f"_{name}"
        if is_valid_tag_name(fixed):
            logger.debug("Renamed invalid tag %r to %r", name, fixed)
            return fixed

    raise TagNameError(name)
