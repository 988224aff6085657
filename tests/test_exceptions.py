"""Tests for exception classes."""

import pytest
from jsonxml.exceptions import JsonXmlError, TagNameError


def test_jsonxml_error():
    """Test base JsonXmlError exception."""
    error = JsonXmlError("test error")
    assert str(error) == "test error"
    assert isinstance(error, Exception)


def test_tag_name_error_message():
    """Test TagNameError includes the offending name."""
    error = TagNameError("1bad")
    assert str(error) == "Unable to use '1bad' as an XML tag"
    assert error.name == "1bad"


def test_exception_hierarchy():
    """Test that TagNameError inherits from JsonXmlError."""
    assert issubclass(TagNameError, JsonXmlError)


def test_exception_catching():
    """Test that TagNameError can be caught as JsonXmlError."""
    with pytest.raises(JsonXmlError):
        raise TagNameError("a b")
