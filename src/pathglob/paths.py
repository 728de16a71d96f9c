# Path splitting and normalization for pathglob.
# Both the POSIX ("/") and Windows ("\\") conventions are handled here,
# independent of the host platform: the caller picks the separator.
#
# This module is pure string logic and must never touch the filesystem.

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, List, Tuple

POSIX_SEP = "/"
WINDOWS_SEP = "\\"


@dataclass(frozen=True)
class PathParts:
    prefix: str
    segments: Tuple[str, ...]
    is_absolute: bool

    def root(self, sep: str) -> str:
        # Drive or UNC prefix plus the leading separator, if any.
        return self.prefix + (sep if self.is_absolute else "")

    def join(self, sep: str) -> str:
        return self.root(sep) + sep.join(self.segments)


def split_drive_path(path: str) -> Tuple[str, str]:
    # Separate a Windows drive specifier ("c:") from the rest of the path.
    if len(path) >= 2 and path[1] == ":" and path[0].isalpha():
        return path[:2], path[2:]
    # A lone colon names no drive and carries nothing. Any other colon is
    # ordinary segment text.
    if path == ":":
        return "", ""
    return "", path


def _split_unc(path: str, sep: str) -> Tuple[str, str]:
    # "\\server\share": exactly two separators, then a server name.
    # Three or more leading separators are just a root.
    if len(path) > 2 and path[0] == sep and path[1] == sep and path[2] != sep:
        end = path.find(sep, 2)
        if end < 0:
            return path, ""
        return path[:end], path[end:]
    return "", path


def split(path: str, sep: str = os.sep) -> PathParts:
    # An empty path is one empty component, not zero components.
    if not path:
        return PathParts(prefix="", segments=("",), is_absolute=False)

    prefix, rest = "", path
    if sep == WINDOWS_SEP:
        prefix, rest = _split_unc(path, sep)
        if not prefix:
            prefix, rest = split_drive_path(path)

    stripped = rest.lstrip(sep)
    segments = tuple(seg for seg in stripped.split(sep) if seg)
    return PathParts(
        prefix=prefix,
        segments=segments,
        is_absolute=len(stripped) != len(rest),
    )


def split_path(path: str, sep: str = os.sep) -> List[str]:
    # List form of split(): the root is glued onto the first component,
    # e.g. "/foo/bar" -> ["/foo", "bar"] and "d:\\" -> ["d:\\"].
    parts = split(path, sep)
    pieces = list(parts.segments)
    root = parts.root(sep)
    if root:
        if pieces:
            pieces[0] = root + pieces[0]
        else:
            pieces = [root]
    return pieces


def join_path(pieces: Iterable[str], sep: str = os.sep) -> str:
    # A trailing empty piece produces a trailing separator.
    result = ""
    for i, piece in enumerate(pieces):
        if i == 0 or result.endswith(sep):
            result += piece
        else:
            result += sep + piece
    return result


def normalize(path: str, sep: str = os.sep) -> str:
    # Collapse separators and resolve "." and ".." segments.
    # Total: every string maps to exactly one normalized string.
    if not path:
        return "."

    # Historical POSIX convention: a path of exactly two slashes is kept.
    if sep == POSIX_SEP and path == sep * 2:
        return path

    parts = split(path, sep)
    resolved: List[str] = []
    for seg in parts.segments:
        if seg == ".":
            continue
        if seg == "..":
            if resolved and resolved[-1] != "..":
                resolved.pop()
            elif not parts.is_absolute:
                resolved.append(seg)
            # Nothing sits above an absolute root (or a drive/UNC prefix).
            continue
        resolved.append(seg)

    result = PathParts(parts.prefix, tuple(resolved), parts.is_absolute).join(sep)
    return result or "."


def normalize_posix_path(path: str) -> str:
    return normalize(path, POSIX_SEP)


def normalize_windows_path(path: str) -> str:
    return normalize(path, WINDOWS_SEP)


def dirname_basename(path: str, sep: str = os.sep) -> Tuple[str, str]:
    if not path:
        return "", ""
    if path == ".":
        return ".", ""

    parts = split(path, sep)
    root = parts.root(sep)
    if not parts.segments:
        return root or ".", ""

    *parents, base = parts.segments
    if parents:
        return root + sep.join(parents), base
    return root or ".", base


def dirname(path: str, sep: str = os.sep) -> str:
    return dirname_basename(path, sep)[0]


def basename(path: str, sep: str = os.sep) -> str:
    # Unlike dirname_basename(), "." is its own basename and a bare root
    # is returned as-is.
    parts = split(path, sep)
    if parts.segments:
        return parts.segments[-1]
    return parts.root(sep)
