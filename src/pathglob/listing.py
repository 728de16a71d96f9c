# Directory-listing back ends for pathglob.
# The glob engine only needs three capabilities from the filesystem:
# list the immediate children of a directory, and check one path for
# existence or directory-ness.
#
# Back ends are picked by tag from a registry at startup.

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol

from pathglob.errors import UnknownListerError

DEFAULT_LISTER = "scandir"


@dataclass(frozen=True)
class Entry:
    name: str
    is_dir: bool


class Lister(Protocol):
    def children(self, directory: str) -> List[Entry]:
        ...

    def exists(self, path: str) -> bool:
        ...

    def is_dir(self, path: str) -> bool:
        ...


class ScandirLister:
    # os.scandir() reports directory-ness without an extra stat on most platforms.
    def children(self, directory: str) -> List[Entry]:
        # Materialize inside the with-block so the directory handle is
        # released even when the consumer abandons a walk.
        try:
            with os.scandir(directory or os.curdir) as it:
                return [Entry(name=e.name, is_dir=e.is_dir()) for e in it]
        except (FileNotFoundError, NotADirectoryError):
            # Vanished between discovery and listing, or not a directory.
            return []

    def exists(self, path: str) -> bool:
        return os.path.lexists(path or os.curdir)

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path or os.curdir)


class PathlibLister:
    def children(self, directory: str) -> List[Entry]:
        base = Path(directory or os.curdir)
        try:
            return [Entry(name=p.name, is_dir=p.is_dir()) for p in base.iterdir()]
        except (FileNotFoundError, NotADirectoryError):
            return []

    def exists(self, path: str) -> bool:
        p = Path(path or os.curdir)
        return p.exists() or p.is_symlink()

    def is_dir(self, path: str) -> bool:
        return Path(path or os.curdir).is_dir()


_REGISTRY: Dict[str, Callable[[], Lister]] = {
    "scandir": ScandirLister,
    "pathlib": PathlibLister,
}


def register_lister(tag: str, factory: Callable[[], Lister]) -> None:
    _REGISTRY[tag] = factory


def available_listers() -> List[str]:
    return sorted(_REGISTRY)


def get_lister(tag: Optional[str] = None) -> Lister:
    key = tag or DEFAULT_LISTER
    try:
        factory = _REGISTRY[key]
    except KeyError:
        raise UnknownListerError(
            f"Unknown lister {key!r}; available: {', '.join(available_listers())}"
        ) from None
    return factory()
