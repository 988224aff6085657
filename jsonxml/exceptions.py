"""Exception classes for jsonxml."""


class JsonXmlError(Exception):
    """Base exception for all jsonxml errors."""


class TagNameError(JsonXmlError):
    """Raised when a key cannot be used as an XML element name.

    This exception aborts the whole conversion. It is raised when a mapping
    key (or the root tag) fails the XML ``Name`` grammar and either the
    underscore fix-up is disabled or the fixed-up name is still invalid.

    Attributes:
        name: The offending key, as it appeared in the input
    """

    def __init__(self, name: str):
        super().__init__(f"Unable to use '{name}' as an XML tag")
        self.name = name
