"""Canonical pathmix API surface.

Location helpers find the calling source file on their own::

    from pathmix import directory_of, home

    CONFIG = directory_of("config", "settings.toml")
    SSH_DIR = home(".ssh")

When stack inspection is not reliable (code run through ``exec``, frozen
apps), pass ``Path(__file__).as_uri()`` as the first argument instead.
"""

from __future__ import annotations

import os

from pathmix.core._internal.path_proxy import DynamicPathProxy
from pathmix.core.caller import locate_caller_file
from pathmix.core.errors import (
    CallerResolutionError,
    InvalidFileUrlError,
    PathMixError,
)
from pathmix.core.file_urls import file_url_to_path, is_file_url
from pathmix.core.path_utils import (
    ParsedPath,
    basename,
    dirname,
    extname,
    format,
    is_absolute,
    join,
    join_onto,
    normalize,
    parse,
    relative,
    sep,
)
from pathmix.core.system_dirs import cwd, home, home_dir, tmp, tmp_dir
from pathmix.core.tokens import expand_home_token, resolve_with_tokens

HOME = DynamicPathProxy(home_dir, label="HOME")
CWD = DynamicPathProxy(os.getcwd, label="CWD")
TMP = DynamicPathProxy(tmp_dir, label="TMP")


def _explicit_path(explicit_ref: object, operation: str) -> str | None:
    """Decode ``explicit_ref`` or return None when it is absent."""
    if explicit_ref is None:
        return None
    if is_file_url(explicit_ref):
        return file_url_to_path(explicit_ref)
    raise InvalidFileUrlError(
        f"pathmix.{operation}(): expected a file:// URL such as "
        f"Path(__file__).as_uri(), got {explicit_ref!r}"
    )


def directory_of(*args: str | None, stacklevel: int = 1) -> str:
    """Return the caller's directory, optionally joined with extra segments.

    A leading ``file://`` argument names the file explicitly; any other
    arguments are segments joined onto the directory.
    """
    if args and args[0] is None:
        args = args[1:]
    if args and is_file_url(args[0]):
        base = dirname(file_url_to_path(args[0]))
        segments = args[1:]
    else:
        caller_file = locate_caller_file(
            operation="directory_of", stacklevel=stacklevel + 1
        )
        base = dirname(caller_file)
        segments = args
    return join_onto(base, *segments) if segments else base


def file_of(explicit_ref: str | None = None, *, stacklevel: int = 1) -> str:
    """Return the caller's source file, or the decoded explicit reference."""
    explicit = _explicit_path(explicit_ref, "file_of")
    if explicit is not None:
        return explicit
    return locate_caller_file(operation="file_of", stacklevel=stacklevel + 1)


def this_dir(explicit_ref: str | None = None, *, stacklevel: int = 1) -> str:
    """Drop-in for the directory of the calling module's ``__file__``."""
    explicit = _explicit_path(explicit_ref, "this_dir")
    if explicit is not None:
        return dirname(explicit)
    return dirname(
        locate_caller_file(operation="this_dir", stacklevel=stacklevel + 1)
    )


def this_file(explicit_ref: str | None = None, *, stacklevel: int = 1) -> str:
    """Drop-in for the calling module's ``__file__``."""
    explicit = _explicit_path(explicit_ref, "this_file")
    if explicit is not None:
        return explicit
    return locate_caller_file(operation="this_file", stacklevel=stacklevel + 1)


__all__ = [
    "CWD",
    "HOME",
    "TMP",
    "CallerResolutionError",
    "InvalidFileUrlError",
    "ParsedPath",
    "PathMixError",
    "basename",
    "cwd",
    "directory_of",
    "dirname",
    "expand_home_token",
    "extname",
    "file_of",
    "file_url_to_path",
    "format",
    "home",
    "is_absolute",
    "is_file_url",
    "join",
    "normalize",
    "parse",
    "relative",
    "resolve_with_tokens",
    "sep",
    "this_dir",
    "this_file",
    "tmp",
]
