"""Conversion between ``file://`` references and platform paths."""

from __future__ import annotations

import os
import re
from urllib.parse import urlsplit
from urllib.request import url2pathname

from pathmix.core.errors import InvalidFileUrlError

FILE_URL_PREFIX = "file://"

_ENCODED_SEPARATOR_RE = re.compile(r"%2f", re.IGNORECASE)
_ENCODED_BACKSLASH_RE = re.compile(r"%5c", re.IGNORECASE)


def is_file_url(value: object) -> bool:
    """Return True only for strings carrying the ``file://`` scheme prefix."""
    return isinstance(value, str) and value.startswith(FILE_URL_PREFIX)


def file_url_to_path(url: str) -> str:
    """Decode a local ``file://`` URL into an absolute platform path.

    Percent-escapes are decoded. Encoded separators are rejected since they
    cannot be represented in the decoded path without changing its meaning.
    """
    if not is_file_url(url):
        raise InvalidFileUrlError(f"Not a file URL: {url!r}")
    parts = urlsplit(url)
    path = parts.path
    if os.name == "nt":
        if _ENCODED_SEPARATOR_RE.search(path) or _ENCODED_BACKSLASH_RE.search(path):
            raise InvalidFileUrlError(
                f"File URL path must not include encoded \\ or / characters: {url!r}"
            )
        if parts.netloc and parts.netloc != "localhost":
            # UNC share: file://server/share/x -> \\server\share\x
            path = f"//{parts.netloc}{path}"
    else:
        if parts.netloc not in ("", "localhost"):
            raise InvalidFileUrlError(
                f"File URL host must be empty or 'localhost' on this platform: {url!r}"
            )
        if _ENCODED_SEPARATOR_RE.search(path):
            raise InvalidFileUrlError(
                f"File URL path must not include encoded / characters: {url!r}"
            )

    decoded = url2pathname(path)
    if not decoded or not os.path.isabs(decoded):
        raise InvalidFileUrlError(f"File URL does not name an absolute path: {url!r}")
    return decoded


__all__ = ["FILE_URL_PREFIX", "file_url_to_path", "is_file_url"]
