# Shared data models for pathglob.
# Lives in its own module to avoid circular imports between cli and core.

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path as FSPath
from typing import Optional, Tuple

from pathglob.paths import POSIX_SEP, WINDOWS_SEP


class Convention(str, Enum):
    posix = "posix"
    windows = "windows"

    @property
    def sep(self) -> str:
        return WINDOWS_SEP if self is Convention.windows else POSIX_SEP

    @classmethod
    def host(cls) -> "Convention":
        return cls.windows if os.sep == WINDOWS_SEP else cls.posix


class EntryFilter(str, Enum):
    all = "all"
    files = "files"
    dirs = "dirs"


class FailureKind(str, Enum):
    precondition = "precondition"
    io = "io"


@dataclass(frozen=True)
class CopyFailure:
    kind: FailureKind
    path: str
    message: str


@dataclass(frozen=True)
class CopyResult:
    ok: bool
    copied: Tuple[str, ...] = ()
    failure: Optional[CopyFailure] = None

    @classmethod
    def failed(
        cls,
        kind: FailureKind,
        path: str,
        message: str,
        copied: Tuple[str, ...] = (),
    ) -> "CopyResult":
        return cls(ok=False, copied=copied, failure=CopyFailure(kind, path, message))

    @property
    def is_success(self) -> bool:
        return self.ok

    @property
    def is_failure(self) -> bool:
        return not self.ok


@dataclass(frozen=True)
class GlobOptions:
    convention: Convention
    simple: bool
    only: EntryFilter
    sort: bool
    lister: str

    report_path: Optional[FSPath]


@dataclass(frozen=True)
class CopyOptions:
    create: bool
    dry_run: bool

    report_path: Optional[FSPath]
