"""Exception types raised by pathmix helpers."""

from __future__ import annotations


class PathMixError(Exception):
    """Base class for pathmix failures."""


class CallerResolutionError(PathMixError, RuntimeError):
    """Stack inspection could not locate the calling source file."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(
            f"pathmix.{operation}(): could not detect caller file. "
            "Pass Path(__file__).as_uri() explicitly."
        )


class InvalidFileUrlError(PathMixError, ValueError):
    """An explicit file reference is not a decodable local ``file://`` URL."""


__all__ = ["CallerResolutionError", "InvalidFileUrlError", "PathMixError"]
