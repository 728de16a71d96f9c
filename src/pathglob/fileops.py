# Bulk file copy and small file helpers for pathglob.
# Outcomes are returned as CopyResult values; filesystem errors are never
# raised to the caller and never silently dropped.
#
# All preconditions are checked before the first byte is written.

from __future__ import annotations

import os
import shutil
from typing import Iterable, List, Optional, Union

from pathglob.models import CopyResult, FailureKind
from pathglob.paths import basename, join_path

PathLike = Union[str, "os.PathLike[str]"]

COPY_CHUNK_SIZE = 1024 * 1024


def _as_paths(sources: Union[PathLike, Iterable[PathLike]]) -> List[str]:
    # A single path is accepted as a one-element batch.
    if isinstance(sources, (str, os.PathLike)):
        sources = [sources]
    return [os.fspath(s) for s in sources]


def _target(source: str, dest: str) -> str:
    return join_path([dest, basename(source, os.sep)], os.sep)


def _precondition_failure(
    source_paths: List[str],
    dest: str,
    create_destination: bool,
) -> Optional[CopyResult]:
    if not os.path.exists(dest):
        if not create_destination:
            return CopyResult.failed(
                FailureKind.precondition, dest, "destination directory does not exist"
            )
    elif not os.path.isdir(dest):
        return CopyResult.failed(
            FailureKind.precondition, dest, "destination is not a directory"
        )

    for source in source_paths:
        if not os.path.isfile(source):
            reason = "source is not a regular file" if os.path.exists(source) else "source does not exist"
            return CopyResult.failed(FailureKind.precondition, source, reason)

        target = _target(source, dest)
        # Opening the target for writing would truncate the source first.
        if os.path.exists(target) and os.path.samefile(source, target):
            return CopyResult.failed(
                FailureKind.precondition, source, "source and target are the same file"
            )
    return None


def check_copy(
    sources: Union[PathLike, Iterable[PathLike]],
    destination_dir: PathLike,
    create_destination: bool = False,
) -> CopyResult:
    # Run every precondition of copy() without writing anything.
    # On success `copied` lists the targets a real copy would write.
    source_paths = _as_paths(sources)
    dest = os.fspath(destination_dir)
    failure = _precondition_failure(source_paths, dest, create_destination)
    if failure is not None:
        return failure
    return CopyResult(ok=True, copied=tuple(_target(s, dest) for s in source_paths))


def copy(
    sources: Union[PathLike, Iterable[PathLike]],
    destination_dir: PathLike,
    create_destination: bool = False,
) -> CopyResult:
    source_paths = _as_paths(sources)
    dest = os.fspath(destination_dir)

    failure = _precondition_failure(source_paths, dest, create_destination)
    if failure is not None:
        return failure

    # Sources are all known good before the destination is created.
    if not os.path.isdir(dest):
        try:
            os.makedirs(dest)
        except OSError as exc:
            return CopyResult.failed(
                FailureKind.precondition,
                dest,
                f"cannot create destination directory: {exc.strerror or exc}",
            )

    copied: List[str] = []
    for source in source_paths:
        target = _target(source, dest)
        try:
            _copy_file(source, target)
        except OSError as exc:
            # Files copied so far stay in place; only success is all-or-nothing.
            return CopyResult.failed(
                FailureKind.io, source, str(exc), copied=tuple(copied)
            )
        copied.append(target)

    return CopyResult(ok=True, copied=tuple(copied))


def _copy_file(source: str, target: str) -> None:
    # The source is read to EOF before the copy counts as done.
    with open(source, "rb") as src, open(target, "wb") as dst:
        shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)


def touch(path: PathLike) -> None:
    # Create an empty file, or bump the modification time of an existing one.
    with open(path, "a", encoding="utf-8"):
        pass
    os.utime(path, None)
