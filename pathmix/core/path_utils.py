"""Standard path utilities re-exported under the pathmix namespace."""

from __future__ import annotations

import os
from typing import NamedTuple

sep = os.sep


class ParsedPath(NamedTuple):
    """Components of a path as produced by :func:`parse`."""

    root: str
    dir: str
    base: str
    ext: str
    name: str


def join(*segments: str) -> str:
    """Join segments and normalize the result (``.``/``..`` and separators)."""
    parts = [s for s in segments if s]
    if not parts:
        return "."
    return os.path.normpath(os.path.join(*parts))


def join_onto(base: str, *segments: str) -> str:
    """Join segments under ``base`` even when a segment is itself absolute.

    ``join_onto("/home/u", "/etc")`` gives ``"/home/u/etc"``; plain :func:`join`
    would restart at ``"/etc"``.
    """
    seps = os.sep + (os.altsep or "")
    relative_parts = [os.path.splitdrive(os.fspath(s))[1].lstrip(seps) for s in segments]
    return join(os.fspath(base), *relative_parts)


def normalize(p: str) -> str:
    return os.path.normpath(p) if p else "."


def basename(p: str, ext: str | None = None) -> str:
    """Return the final component, dropping ``ext`` when it is a true suffix."""
    base = os.path.basename(p)
    if ext and base.endswith(ext) and base != ext:
        return base[: -len(ext)]
    return base


def dirname(p: str) -> str:
    return os.path.dirname(p)


def extname(p: str) -> str:
    return os.path.splitext(p)[1]


def relative(from_: str, to: str) -> str:
    return os.path.relpath(to, from_)


def is_absolute(p: str) -> bool:
    return os.path.isabs(p)


def parse(p: str) -> ParsedPath:
    """Split ``p`` into root, directory, base name, extension and stem.

    ``parse("/home/u/file.txt")`` gives root ``"/"``, dir ``"/home/u"``,
    base ``"file.txt"``, ext ``".txt"`` and name ``"file"``.
    """
    drive, rest = os.path.splitdrive(p)
    root = drive
    seps = (os.sep, os.altsep) if os.altsep else (os.sep,)
    if rest and rest[0] in seps:
        root += rest[0]
    trimmed = p
    while len(trimmed) > len(root) and trimmed[-1:] in seps:
        trimmed = trimmed[:-1]
    head, base = os.path.split(trimmed)
    if len(trimmed) <= len(root):
        base = ""
        head = root
    name, ext = os.path.splitext(base)
    return ParsedPath(root=root, dir=head, base=base, ext=ext, name=name)


def format(parsed: ParsedPath) -> str:  # noqa: A001
    """Rebuild a path from :class:`ParsedPath` components.

    ``dir`` wins over ``root`` and ``base`` wins over ``name + ext``.
    """
    directory = parsed.dir or parsed.root
    base = parsed.base or f"{parsed.name or ''}{parsed.ext or ''}"
    if not directory:
        return base
    if directory == parsed.root:
        return f"{directory}{base}"
    return f"{directory}{os.sep}{base}"


__all__ = [
    "ParsedPath",
    "basename",
    "dirname",
    "extname",
    "format",
    "is_absolute",
    "join",
    "join_onto",
    "normalize",
    "parse",
    "relative",
    "sep",
]
