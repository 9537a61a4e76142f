"""Conversion of absolute file paths to file URLs."""

from __future__ import annotations

import os
from urllib.parse import quote

# characters that stay unescaped in the path of a URL
_PATH_SAFE = "/$&+,:;=@"


def _escape(path: str) -> str:
    return quote(path, safe=_PATH_SAFE)


def _to_slash(path: str) -> str:
    return path.replace(os.sep, "/") if os.sep != "/" else path


def from_file_path(path: str) -> str:
    """Return the file URL for the absolute ``path``.

    Raises ValueError if ``path`` is not absolute.
    """
    if not os.path.isabs(path):
        raise ValueError("path is not absolute")

    volume, _ = os.path.splitdrive(path)
    if volume:
        if volume.startswith("\\\\"):
            # \\host\share\file becomes file://host/share/file
            rest = _to_slash(path[2:])
            host, sep, tail = rest.partition("/")
            if not sep:
                return f"file://{rest}/"
            return f"file://{host}{_escape('/' + tail)}"
        # C:\path\to\file becomes file:///C:/path/to/file
        return "file://" + _escape("/" + _to_slash(path))

    return "file://" + _escape(_to_slash(path))