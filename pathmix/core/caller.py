"""Caller-location resolution: find the source file that invoked a helper.

Two independent paths exist. An explicit ``file://`` reference is decoded and
returned as-is. Without one, the call stack is walked ``stacklevel`` frames up
from the public entry point and the frame's code filename is used. The two
paths share no fallback: a failed stack read raises, it never guesses.
"""

from __future__ import annotations

import inspect
import logging
import os

from pathmix.core.errors import CallerResolutionError
from pathmix.core.file_urls import file_url_to_path, is_file_url

logger = logging.getLogger(__name__)


def _is_usable_filename(filename: str | None) -> bool:
    # Code compiled from strings, the REPL and frozen modules report
    # pseudo-names such as "<string>" or "<frozen importlib._bootstrap>".
    if not filename:
        return False
    return not (filename.startswith("<") and filename.endswith(">"))


def _frame_filename(depth: int) -> str | None:
    """Return the code filename ``depth`` frames above this helper's caller."""
    frame = inspect.currentframe()
    try:
        # Step past this helper itself, then ``depth`` more frames.
        for _ in range(depth + 1):
            if frame is None:
                return None
            frame = frame.f_back
        if frame is None:
            return None
        return frame.f_code.co_filename
    finally:
        # Break the frame reference cycle promptly.
        del frame


def locate_caller_file(
    explicit_ref: object = None,
    *,
    operation: str = "file_of",
    stacklevel: int = 1,
) -> str:
    """Return the absolute source path of the calling code.

    ``explicit_ref`` short-circuits inspection when it is a ``file://`` URL.
    ``stacklevel=1`` names the immediate caller of this function; wrappers add
    one for every frame they introduce. ``operation`` is reported in the
    :class:`CallerResolutionError` raised when no source file can be found.
    """
    if is_file_url(explicit_ref):
        logger.debug("%s: using explicit reference %s", operation, explicit_ref)
        return file_url_to_path(explicit_ref)

    if stacklevel < 1:
        raise ValueError(f"stacklevel must be >= 1, got {stacklevel}")

    filename = _frame_filename(stacklevel)
    if not _is_usable_filename(filename):
        logger.debug(
            "%s: stack inspection yielded no source file (got %r)",
            operation,
            filename,
        )
        raise CallerResolutionError(operation)

    if is_file_url(filename):
        return file_url_to_path(filename)
    return os.path.abspath(filename)


__all__ = ["locate_caller_file"]
