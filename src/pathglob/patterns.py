# Shell-style wildcard compilation for pathglob.
# A pattern here always describes a single path segment: separators are
# split off by the caller, so "*" and "?" can never cross one.
#
# Supported syntax: "*", "?", "[set]", "[!set]" / "[^set]" with a-z ranges.
# Everything else matches literally and case-sensitively.

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, Iterable, List, Tuple, Union

from pathglob.errors import PatternSyntaxError

RECURSIVE_MARKER = "**"
_MAGIC_CHARS = frozenset("*?[")
_NEGATION_CHARS = "!^"


class Wildcard(Enum):
    any_char = "?"
    any_run = "*"


@dataclass(frozen=True)
class CharClass:
    chars: FrozenSet[str]
    ranges: Tuple[Tuple[str, str], ...]
    negated: bool = False

    def contains(self, ch: str) -> bool:
        hit = ch in self.chars or any(lo <= ch <= hi for lo, hi in self.ranges)
        return hit != self.negated

    def to_regex(self) -> str:
        # re.escape() covers "]", "^", "-" and "\\", which are the only
        # characters with meaning inside a regex class.
        body = "".join(re.escape(ch) for ch in sorted(self.chars))
        body += "".join(f"{re.escape(lo)}-{re.escape(hi)}" for lo, hi in self.ranges)
        return f"[{'^' if self.negated else ''}{body}]"


Token = Union[str, Wildcard, CharClass]


@dataclass(frozen=True)
class SegmentMatcher:
    pattern: str
    tokens: Tuple[Token, ...]
    regex: re.Pattern

    def matches(self, name: str) -> bool:
        return self.regex.fullmatch(name) is not None


@dataclass(frozen=True)
class LiteralSegment:
    text: str


@dataclass(frozen=True)
class WildcardSegment:
    matcher: SegmentMatcher


@dataclass(frozen=True)
class RecursiveSegment:
    pass


PatternSegment = Union[LiteralSegment, WildcardSegment, RecursiveSegment]


def has_magic(segment: str) -> bool:
    return any(ch in _MAGIC_CHARS for ch in segment)


def _parse_class(pattern: str, start: int) -> Tuple[CharClass, int]:
    # Parse the class opened at pattern[start] ("[").
    # Returns the class and the index just past its closing "]".
    n = len(pattern)
    i = start + 1
    negated = False
    if i < n and pattern[i] in _NEGATION_CHARS:
        negated = True
        i += 1

    chars = set()
    ranges: List[Tuple[str, str]] = []
    first = True
    while True:
        if i >= n:
            raise PatternSyntaxError("unterminated character class", pattern, start)
        ch = pattern[i]
        # A "]" right after the opening bracket is a member, not the end.
        if ch == "]" and not first:
            break
        first = False
        if i + 2 < n and pattern[i + 1] == "-" and pattern[i + 2] != "]":
            lo, hi = ch, pattern[i + 2]
            if lo > hi:
                raise PatternSyntaxError(f"reversed range {lo}-{hi}", pattern, i)
            ranges.append((lo, hi))
            i += 3
        else:
            chars.add(ch)
            i += 1

    return CharClass(chars=frozenset(chars), ranges=tuple(ranges), negated=negated), i + 1


def _tokenize(pattern: str) -> Tuple[Token, ...]:
    tokens: List[Token] = []
    literal: List[str] = []

    def flush() -> None:
        if literal:
            tokens.append("".join(literal))
            literal.clear()

    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "*":
            flush()
            # Consecutive stars match exactly what one star matches.
            if not tokens or tokens[-1] is not Wildcard.any_run:
                tokens.append(Wildcard.any_run)
            i += 1
        elif ch == "?":
            flush()
            tokens.append(Wildcard.any_char)
            i += 1
        elif ch == "[":
            flush()
            char_class, i = _parse_class(pattern, i)
            tokens.append(char_class)
        else:
            literal.append(ch)
            i += 1
    flush()
    return tuple(tokens)


def _to_regex(tokens: Iterable[Token]) -> str:
    parts: List[str] = []
    for token in tokens:
        if token is Wildcard.any_run:
            parts.append(".*")
        elif token is Wildcard.any_char:
            parts.append(".")
        elif isinstance(token, CharClass):
            parts.append(token.to_regex())
        else:
            parts.append(re.escape(token))
    return "".join(parts)


@lru_cache(maxsize=256)
def compile_segment(pattern: str) -> SegmentMatcher:
    tokens = _tokenize(pattern)
    regex = re.compile(_to_regex(tokens), re.DOTALL)
    return SegmentMatcher(pattern=pattern, tokens=tokens, regex=regex)


def match_segment(pattern: str, candidate: str) -> bool:
    return compile_segment(pattern).matches(candidate)


def fnmatch(name: str, pattern: str) -> bool:
    # Test a single name against a wildcard pattern (name first).
    return match_segment(pattern, name)


def compile_pattern(segments: Iterable[str], recursive: bool = True) -> Tuple[PatternSegment, ...]:
    # Every wildcard is compiled here, up front, so syntax errors are raised
    # before any directory is read.
    # With recursive=False a "**" segment is an ordinary single-level "*".
    compiled: List[PatternSegment] = []
    for seg in segments:
        if recursive and seg == RECURSIVE_MARKER:
            # "**/**" walks exactly the same tree as "**".
            if compiled and isinstance(compiled[-1], RecursiveSegment):
                continue
            compiled.append(RecursiveSegment())
        elif has_magic(seg):
            compiled.append(WildcardSegment(compile_segment(seg)))
        else:
            compiled.append(LiteralSegment(seg))
    return tuple(compiled)
