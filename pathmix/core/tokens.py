"""Home-directory shorthand expansion for path resolution."""

from __future__ import annotations

import os

from pathmix.core.system_dirs import home_dir

# Checked in order; only a leading occurrence is replaced.
HOME_TOKENS = ("$HOME", "~")


def _coerce_segment(segment: object) -> str:
    if isinstance(segment, os.PathLike):
        segment = os.fspath(segment)
    if not isinstance(segment, str):
        raise TypeError(
            f"Path segments must be str or os.PathLike[str], "
            f"not {type(segment).__name__}"
        )
    return segment


def expand_home_token(segment: str) -> str:
    """Replace a leading ``$HOME`` or ``~`` with the OS home directory.

    Tokens anywhere else in the segment are left alone, so ``"a~b"`` and
    ``"x/$HOME"`` come back unchanged.
    """
    segment = _coerce_segment(segment)
    for token in HOME_TOKENS:
        if segment.startswith(token):
            return home_dir() + segment[len(token):]
    return segment


def resolve_with_tokens(*segments: str) -> str:
    """Expand home shorthand in each segment, then build an absolute path.

    Segments are applied left to right from the current directory; an absolute
    segment restarts the path. ``.``/``..`` are collapsed.
    """
    expanded = [expand_home_token(s) for s in segments]
    return os.path.abspath(os.path.join(os.getcwd(), *expanded))


__all__ = ["HOME_TOKENS", "expand_home_token", "resolve_with_tokens"]
