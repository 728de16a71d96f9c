# Exception hierarchy for pathglob.
# Only programming and pattern errors are raised; filesystem outcomes of a
# bulk copy are returned as values (see models.CopyResult).

from __future__ import annotations


class PathGlobError(Exception):
    """Base error for pathglob."""


class PatternSyntaxError(PathGlobError, ValueError):
    """Raised when a wildcard pattern cannot be compiled."""

    def __init__(self, message: str, pattern: str, position: int) -> None:
        super().__init__(f"{message} at index {position} in pattern {pattern!r}")
        self.pattern = pattern
        self.position = position


class UnknownListerError(PathGlobError, KeyError):
    """Raised when no directory lister is registered under a tag."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
