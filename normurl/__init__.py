"""Unified locators for local file paths and HTTP(S) URLs."""

from logging import NullHandler, getLogger

from .errors import (
    InconsistentStateError,
    InvalidPathError,
    LocatorError,
    MissingFieldError,
    ParseError,
    UnsupportedSchemeError,
)
from .models import Kind, Locator
from .pathstyle import POSIX, WINDOWS, PathStyle, native_style

getLogger(__name__).addHandler(NullHandler())

__all__ = [
    "POSIX",
    "WINDOWS",
    "InconsistentStateError",
    "InvalidPathError",
    "Kind",
    "Locator",
    "LocatorError",
    "MissingFieldError",
    "ParseError",
    "PathStyle",
    "UnsupportedSchemeError",
    "native_style",
]
