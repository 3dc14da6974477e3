"""Platform path conventions.

A ``PathStyle`` bundles the path helpers of one platform so locators can be
built and resolved with either POSIX or Windows rules on any host.
"""

import ntpath
import posixpath
from dataclasses import dataclass
from os import name as os_name
from types import ModuleType
from typing import Optional


@dataclass(frozen=True)
class PathStyle:
    """Path convention backed by ``posixpath`` or ``ntpath``.

    Attributes:
        name: Short label, ``"posix"`` or ``"windows"``.
        module: The stdlib path module implementing the convention.
    """

    name: str
    module: ModuleType

    @property
    def is_windows(self) -> bool:
        """Return True for the Windows (``ntpath``) convention."""
        return self.module is ntpath

    @property
    def sep(self) -> str:
        """Native path separator."""
        return self.module.sep

    def is_absolute(self, path: str) -> bool:
        """Return True if ``path`` is absolute under this convention."""
        return self.module.isabs(path)

    def dirname(self, path: str) -> str:
        """Return the directory portion of ``path`` (``"."`` when empty)."""
        return self.module.dirname(path) or "."

    def join(self, *paths: str) -> str:
        """Join path segments and collapse ``.``, ``..`` and repeated separators."""
        return self.module.normpath(self.module.join(*paths))

    def from_slash(self, path: str) -> str:
        """Replace forward slashes with the native separator."""
        if self.sep == "/":
            return path
        return path.replace("/", self.sep)

    def __repr__(self) -> str:
        return f"PathStyle({self.name})"


POSIX = PathStyle("posix", posixpath)
WINDOWS = PathStyle("windows", ntpath)


def native_style() -> PathStyle:
    """Return the path convention of the running interpreter."""
    return WINDOWS if os_name == "nt" else POSIX


def pick_style(style: Optional[PathStyle]) -> PathStyle:
    """Return ``style`` or the host convention when it is None."""
    return style if style is not None else native_style()


__all__ = ["POSIX", "WINDOWS", "PathStyle", "native_style", "pick_style"]
