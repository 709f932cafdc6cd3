"""OS directory accessors with optional segment joining."""

from __future__ import annotations

import os
import tempfile

from pathmix.core.path_utils import join_onto


def home_dir() -> str:
    """Return the OS home directory (``$HOME`` / ``%USERPROFILE%``)."""
    return os.path.expanduser("~")


def tmp_dir() -> str:
    return tempfile.gettempdir()


def home(*segments: str) -> str:
    base = home_dir()
    return join_onto(base, *segments) if segments else base


def cwd(*segments: str) -> str:
    base = os.getcwd()
    return join_onto(base, *segments) if segments else base


def tmp(*segments: str) -> str:
    base = tmp_dir()
    return join_onto(base, *segments) if segments else base


__all__ = ["cwd", "home", "home_dir", "tmp", "tmp_dir"]
