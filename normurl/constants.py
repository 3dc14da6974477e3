"""Project-wide constants used by normurl.

These values define the schemes a locator accepts, the field names of the
structured wire form and the JSON shapes understood by the list loader. The
module is stdlib-only.
"""

from re import compile as re_compile

FILE_SCHEME = "file"
REMOTE_SCHEMES = frozenset({"http", "https"})

URL_FIELD = "Url"
FILE_FIELD = "File"

CONTROL_CHAR_RE = re_compile(r"[\x00-\x1f\x7f]")

LIST_KEYS =("locators", "urls", "paths", "sources")

EXPECTED_ABSOLUTE_PATH = "expected absolute path"
UNSUPPORTED_SCHEME = "unsupported scheme {scheme}"
MISSING_FIELD = "missing {field}"
FILE_FLAG_MISMATCH = "file flag mismatch"
