"""Exceptions raised while building or decoding locators.

Every error derives from ``ValueError`` so callers that already guard input
parsing with ``except ValueError`` keep working.
"""

from .constants import (
    EXPECTED_ABSOLUTE_PATH,
    FILE_FLAG_MISMATCH,
    MISSING_FIELD,
    UNSUPPORTED_SCHEME,
)


class LocatorError(ValueError):
    """Base class for all locator failures."""


class ParseError(LocatorError):
    """The input string is not a syntactically valid URL."""


class InvalidPathError(LocatorError):
    """A scheme-less input is not an absolute path."""

    def __init__(self, path: str):
        super().__init__(f"{EXPECTED_ABSOLUTE_PATH}: {path!r}")
        self.path = path


class UnsupportedSchemeError(LocatorError):
    """The input carries a scheme other than file, http or https."""

    def __init__(self, scheme: str):
        super().__init__(UNSUPPORTED_SCHEME.format(scheme=scheme))
        self.scheme = scheme


class MissingFieldError(LocatorError):
    """A structured locator lacks a required field."""

    def __init__(self, field: str):
        super().__init__(MISSING_FIELD.format(field=field))
        self.field = field


class InconsistentStateError(LocatorError):
    """The ``File`` flag disagrees with the kind recomputed from ``Url``."""

    def __init__(self, message: str = FILE_FLAG_MISMATCH):
        super().__init__(message)


__all__ = [
    "InconsistentStateError",
    "InvalidPathError",
    "LocatorError",
    "MissingFieldError",
    "ParseError",
    "UnsupportedSchemeError",
]
