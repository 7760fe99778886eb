"""Evaluate compiled glob patterns against normalized paths."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Union

from rule_resolver.constants import PATH_SEPARATOR
from rule_resolver.errors import PatternError
from rule_resolver.patterns.compiler import compile_pattern
from rule_resolver.patterns.models import CompiledPattern, RecursiveSegment


@lru_cache(maxsize=512)
def _compile_cached(pattern: str) -> Optional[CompiledPattern]:
    try:
        return compile_pattern(pattern)
    except PatternError:
        return None


def matches(pattern: Union[str, CompiledPattern, None], path: str) -> bool:
    """Return True when `path` matches `pattern`.

    Never raises: an uncompilable pattern (or None) matches nothing, and so
    does an empty path. `path` must already be normalized.
    """
    compiled: Optional[CompiledPattern] = None
    if isinstance(pattern, str):
        compiled = _compile_cached(pattern)
    elif isinstance(pattern, CompiledPattern):
        compiled = pattern
    if compiled is None or not path:
        return False
    return _match_segments(compiled, path.split(PATH_SEPARATOR))


def _match_segments(compiled: CompiledPattern, path_segments: list[str]) -> bool:
    segments = compiled.segments
    final = len(segments)

    def closure(states: set[int]) -> set[int]:
        expanded = set(states)
        for index in sorted(states):
            while index < final and isinstance(segments[index], RecursiveSegment):
                index += 1
                expanded.add(index)
        return expanded

    states = closure({0})
    for segment in path_segments:
        advanced: set[int] = set()
        for index in states:
            if index == final:
                continue
            current = segments[index]
            if isinstance(current, RecursiveSegment):
                advanced.add(index)
            elif current.matches(segment):
                advanced.add(index + 1)
        if not advanced:
            return False
        states = closure(advanced)
    return final in states
