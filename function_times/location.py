"""Decoding of 'path:line:column' tokens and file identifier normalization."""

import posixpath
import re
from urllib.parse import unquote, urlparse

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _strict_int(value: str) -> int | None:
    """Base-10 integer or None. Rejects whitespace and '_' separators that int() tolerates."""
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def decode_location(token: str) -> tuple[str, int, int] | None:
    """Split 'path:line:column' → (path, line, column), or None if malformed.

    Splits on the first colon only, twice; no attempt is made to
    disambiguate paths that contain colons themselves.
    """
    path, sep, rest = token.partition(":")
    if not sep:
        return None
    line_str, sep, column_str = rest.partition(":")
    if not sep:
        return None
    line = _strict_int(line_str)
    column = _strict_int(column_str)
    if line is None or column is None:
        return None
    return path, line, column


def normalize_file(path_or_url: str) -> str:
    """Normalize a filesystem path or file:// URL to the key used by the index.

    '/tmp/./x.swift', '/tmp/x.swift' and 'file:///tmp/x.swift' all map
    to '/tmp/x.swift'.
    """
    path = path_or_url
    if path.startswith("file://"):
        path = unquote(urlparse(path).path)
    if not path:
        return path
    path = posixpath.normpath(path)
    # normpath keeps exactly two leading slashes (POSIX allows them a special meaning)
    if path.startswith("//"):
        path = path[1:]
    return path


def parse_duration(token: str) -> float:
    """Milliseconds as float; 0.0 when the token is not a number."""
    try:
        return float(token)
    except ValueError:
        return 0.0
