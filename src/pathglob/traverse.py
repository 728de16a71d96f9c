# Filesystem traversal and glob expansion for pathglob.
# This module walks a directory tree one pattern segment at a time and
# yields the paths that match, lazily, as the caller pulls them.
#
# No mutation is allowed here; the filesystem is only read through a Lister.

from __future__ import annotations

import os
from collections import deque
from typing import Deque, Iterator, List, Optional, Sequence, Set, Tuple

from pathglob.listing import Entry, Lister, get_lister
from pathglob.paths import normalize, split
from pathglob.patterns import (
    LiteralSegment,
    PatternSegment,
    WildcardSegment,
    compile_pattern,
)


def _child(directory: str, name: str, sep: str, root: str = "") -> str:
    # "" is the current directory of a relative pattern and a bare drive
    # ("c:") is the current directory on that drive: neither takes a separator.
    if not directory or directory == root or directory.endswith(sep):
        return directory + name
    return directory + sep + name


def eglob(
    pattern: str,
    sep: Optional[str] = None,
    lister: Optional[Lister] = None,
) -> Iterator[str]:
    # Extended glob: a "**" segment matches zero or more directory levels.
    # A trailing "**" yields directories only.
    return _expand(pattern, sep, lister, recursive=True)


def glob(
    pattern: str,
    sep: Optional[str] = None,
    lister: Optional[Lister] = None,
) -> Iterator[str]:
    # Single-level glob: "**" is treated like "*".
    return _expand(pattern, sep, lister, recursive=False)


def _expand(
    pattern: str,
    sep: Optional[str],
    lister: Optional[Lister],
    recursive: bool,
) -> Iterator[str]:
    # Not a generator itself: the pattern is compiled now so a malformed
    # pattern raises at the call site rather than on the first pull.
    sep = sep or os.sep
    if not pattern:
        return iter(())

    parts = split(pattern, sep)
    segments = compile_pattern(parts.segments, recursive=recursive)
    return _walk(parts.root(sep), segments, sep, lister or get_lister())


def _walk(
    root: str,
    segments: Sequence[PatternSegment],
    sep: str,
    lister: Lister,
) -> Iterator[str]:
    if not segments:
        # A bare root such as "/" or "c:\\".
        if root and lister.exists(root):
            yield normalize(root, sep)
        return

    last = len(segments) - 1
    queue: Deque[Tuple[str, int]] = deque([(root, 0)])
    # Separate "**" segments can reach one directory along several routes;
    # each (directory, segment index) state is expanded once.
    seen: Set[Tuple[str, int]] = set()
    # "**" and the segment after it read the same directory back to back.
    cached: Tuple[Optional[str], List[Entry]] = (None, [])
    # Different routes can still land on the same path once ".." is resolved.
    emitted: Set[str] = set()

    def children(directory: str) -> List[Entry]:
        nonlocal cached
        if cached[0] != directory:
            cached = (directory, lister.children(directory))
        return cached[1]

    while queue:
        state = queue.popleft()
        if state in seen:
            continue
        seen.add(state)
        directory, index = state

        if index > last:
            result = normalize(directory, sep)
            if result not in emitted:
                emitted.add(result)
                yield result
            continue

        segment = segments[index]

        if isinstance(segment, LiteralSegment):
            # Check the child directly; no need to list the directory.
            path = _child(directory, segment.text, sep, root)
            if index == last:
                if lister.exists(path):
                    queue.append((path, index + 1))
            elif lister.is_dir(path):
                queue.append((path, index + 1))

        elif isinstance(segment, WildcardSegment):
            for entry in children(directory):
                if not segment.matcher.matches(entry.name):
                    continue
                if index == last or entry.is_dir:
                    queue.append((_child(directory, entry.name, sep, root), index + 1))

        else:
            # Zero levels: try the rest of the pattern right here, next, while
            # this directory's listing is still cached. Past a trailing "**"
            # that simply emits the directory: directories only, no files.
            queue.appendleft((directory, index + 1))
            for entry in children(directory):
                if entry.is_dir:
                    queue.append((_child(directory, entry.name, sep, root), index))


def list_recursively(
    directory: str,
    sep: Optional[str] = None,
    lister: Optional[Lister] = None,
) -> Iterator[str]:
    # Yield every file and directory below `directory` (not the directory itself).
    sep = sep or os.sep
    lister = lister or get_lister()
    # A bare root such as "c:" is joined to its children without a separator.
    root = directory if not split(directory, sep).segments else ""
    stack = [directory]
    while stack:
        current = stack.pop()
        for entry in lister.children(current):
            path = _child(current, entry.name, sep, root)
            yield path
            if entry.is_dir:
                stack.append(path)
