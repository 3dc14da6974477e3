"""Locator model: one value for local file paths and HTTP(S) URLs.

``file://`` URIs and bare absolute paths are normalized into the same shape
(empty scheme, native path) so every operation branches on ``kind`` alone.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional
from urllib.parse import (
    SplitResult,
    parse_qs,
    unquote,
    urlencode,
    urljoin,
    urlsplit,
    urlunsplit,
)

from .constants import (
    CONTROL_CHAR_RE,
    FILE_FIELD,
    FILE_SCHEME,
    REMOTE_SCHEMES,
    URL_FIELD,
)
from .errors import (
    InconsistentStateError,
    InvalidPathError,
    MissingFieldError,
    ParseError,
    UnsupportedSchemeError,
)
from .pathstyle import PathStyle, native_style, pick_style


class Kind(Enum):
    """Discriminant of a locator."""

    FILE = "file"
    REMOTE = "remote"


def _parse(s: str) -> SplitResult:
    """Split ``s`` into URL components, raising ``ParseError`` on bad syntax."""
    if not isinstance(s, str):
        raise ParseError(f"expected a string, got {type(s).__name__}")
    # urlsplit silently drops tab, CR and LF
    if CONTROL_CHAR_RE.search(s):
        raise ParseError(f"invalid control character in URL {s!r}")
    try:
        parsed = urlsplit(s)
        # port is validated lazily by urllib
        _ = parsed.port
    except ValueError as e:
        raise ParseError(f"invalid URL {s!r}: {e}") from e
    return parsed


def _is_drive_path(parsed: SplitResult, s: str, style: PathStyle) -> bool:
    """Return True if ``urlsplit`` read a Windows drive letter as a scheme.

    ``C:\\dir\\file.txt`` splits into scheme ``"c"``; under the Windows
    convention such strings are absolute paths, not URLs.
    """
    return style.is_windows and len(parsed.scheme) == 1 and style.is_absolute(s)


@dataclass
class Locator:
    """A file path or an HTTP(S) URL.

    Attributes:
        kind: ``Kind.FILE`` or ``Kind.REMOTE``.
        parsed: Split URL components. File locators have an empty scheme and
            an absolute native path.
        style: Path convention the locator was built with; not part of
            equality.
    """

    kind: Kind
    parsed: SplitResult
    style: PathStyle = field(default_factory=native_style, compare=False)

    @classmethod
    def new(cls, s: str, style: Optional[PathStyle] = None) -> "Locator":
        """Create a locator from an absolute path, ``file:`` URI or HTTP(S) URL.

        Args:
            s: String to parse.
            style: Path convention; the host convention when None.

        Raises:
            ParseError: ``s`` is not a valid URL.
            InvalidPathError: ``s`` has no scheme and is not absolute.
            UnsupportedSchemeError: the scheme is not file, http or https.
        """
        style = pick_style(style)
        parsed = _parse(s)
        if _is_drive_path(parsed, s, style):
            parsed = SplitResult("", "", s, "", "")

        scheme = parsed.scheme
        if not scheme:
            if not style.is_absolute(s):
                raise InvalidPathError(s)
            return cls(Kind.FILE, parsed, style)

        if scheme == FILE_SCHEME:
            path = unquote(parsed.path)
            if style.is_windows:
                path = style.from_slash(path[1:] if path.startswith("/") else path)
            if not style.is_absolute(path):
                raise InvalidPathError(path)
            return cls(Kind.FILE, parsed._replace(scheme="", path=path), style)

        if scheme not in REMOTE_SCHEMES:
            raise UnsupportedSchemeError(scheme)
        return cls(Kind.REMOTE, parsed, style)

    def resolve(self, s: str) -> "Locator":
        """Resolve ``s`` against this locator and return a new locator.

        A reference with a scheme is constructed on its own. Otherwise file
        locators join ``s`` onto their directory and remote locators apply
        RFC 3986 reference resolution. The receiver is never modified.
        """
        ref = _parse(s)
        if ref.scheme:
            return Locator.new(s, self.style)

        if self.kind is Kind.FILE:
            if self.style.is_absolute(s):
                # wrapped as parsed, without the file: URI normalization
                return Locator(Kind.FILE, ref, self.style)
            path = self.style.join(self.style.dirname(self.parsed.path), s)
            return Locator(Kind.FILE, SplitResult("", "", path, "", ""), self.style)

        resolved = urlsplit(urljoin(self.url, s))
        return Locator(Kind.REMOTE, resolved, self.style)

    def set_query_param(self, name: str, value: str) -> None:
        """Set a query parameter in place; an empty ``value`` deletes it.

        File locators have no query and are left unchanged. The query is
        re-encoded with keys sorted.
        """
        if self.kind is Kind.FILE:
            return
        query = parse_qs(
            self.parsed.query, keep_blank_values=True, errors="surrogateescape"
        )
        if value:
            query[name] = [value]
        else:
            query.pop(name, None)
        encoded = urlencode(sorted(query.items()), doseq=True, errors="surrogateescape")
        self.parsed = self.parsed._replace(query=encoded)

    def with_query_param(self, name: str, value: str) -> "Locator":
        """Return a copy with the query parameter set (or deleted)."""
        clone = replace(self)
        clone.set_query_param(name, value)
        return clone

    @property
    def is_filepath(self) -> bool:
        """Return True if this locator is a local file path."""
        return self.kind is Kind.FILE

    @property
    def is_remote(self) -> bool:
        """Return True if this locator is an HTTP(S) URL."""
        return self.kind is Kind.REMOTE

    @property
    def path(self) -> str:
        """Path component; the native absolute path for file locators."""
        return self.parsed.path

    @property
    def url(self) -> str:
        """Canonical string form."""
        return urlunsplit(self.parsed)

    def to_dict(self) -> Dict[str, Any]:
        """Return the structured wire form ``{"Url": ..., "File": ...}``."""
        return {URL_FIELD: self.url, FILE_FIELD: self.is_filepath}

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], style: Optional[PathStyle] = None
    ) -> "Locator":
        """Rebuild a locator from its wire form.

        ``Url`` is parsed again from scratch, so the result satisfies the same
        invariants as ``Locator.new`` whatever produced ``data``.

        Raises:
            MissingFieldError: ``Url`` is absent or empty, or ``File`` is absent.
            InconsistentStateError: ``File`` does not match the parsed kind.
        """
        if not isinstance(data, Mapping):
            raise ValueError(
                "Unsupported locator format: expected object with Url/File"
            )
        url = data.get(URL_FIELD)
        if not url:
            raise MissingFieldError(URL_FIELD)
        if FILE_FIELD not in data:
            raise MissingFieldError(FILE_FIELD)

        loc = cls.new(url, style)
        if data[FILE_FIELD] is not loc.is_filepath:
            raise InconsistentStateError()
        return loc

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"Locator({self.url!r}, kind={self.kind.name})"


__all__ = ["Kind", "Locator"]
