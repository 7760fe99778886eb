"""Compiled glob pattern AST."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class LiteralSegment:
    text: str

    def matches(self, segment: str) -> bool:
        return segment == self.text


@dataclass(frozen=True)
class WildcardSegment:
    """One path segment with `*` wildcards; `parts` are the literal pieces between them."""

    parts: tuple[str, ...]

    @property
    def wildcard_count(self) -> int:
        return len(self.parts) - 1

    def matches(self, segment: str) -> bool:
        first, last = self.parts[0], self.parts[-1]
        if len(segment) < len(first) + len(last):
            return False
        if not segment.startswith(first) or not segment.endswith(last):
            return False

        position = len(first)
        end = len(segment) - len(last)
        for part in self.parts[1:-1]:
            found = segment.find(part, position, end)
            if found < 0:
                return False
            position = found + len(part)
        return True


@dataclass(frozen=True)
class RecursiveSegment:
    """`**`: zero or more whole path segments."""


Segment = Union[LiteralSegment, WildcardSegment, RecursiveSegment]


@dataclass(frozen=True)
class CompiledPattern:
    source: str
    segments: tuple[Segment, ...]
    specificity: int
