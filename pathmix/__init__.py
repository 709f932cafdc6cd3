"""pathmix: caller-aware path helpers plus the standard path utilities."""

from __future__ import annotations

from pathmix.api import *  # noqa: F401,F403
from pathmix.api import __all__ as _API_ALL

__version__ = "0.1.0"

__all__ = list(_API_ALL)
