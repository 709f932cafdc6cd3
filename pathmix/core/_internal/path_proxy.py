"""Lazy path proxy that re-queries its directory on every access."""

from __future__ import annotations

import os
from collections.abc import Callable

from pathmix.core.path_utils import join_onto


class DynamicPathProxy(os.PathLike):
    """Path-like stand-in for an OS directory that is never cached.

    ``str(proxy)`` and ``os.fspath(proxy)`` return the current value and
    ``proxy / "a" / "b"`` joins segments onto it.
    """

    def __init__(self, resolver: Callable[[], str], *, label: str) -> None:
        self._resolver = resolver
        self._label = label

    def _value(self) -> str:
        return self._resolver()

    def __fspath__(self) -> str:
        return self._value()

    def __str__(self) -> str:
        return self._value()

    def __repr__(self) -> str:
        return f"{self._label}({self._value()!r})"

    def __truediv__(self, other: str | os.PathLike[str]) -> str:
        return join_onto(self._value(), other)

    def __rtruediv__(self, other: str | os.PathLike[str]) -> str:
        return join_onto(other, self._value())


__all__ = ["DynamicPathProxy"]
