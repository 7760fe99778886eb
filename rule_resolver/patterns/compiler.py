"""Compile glob strings into segment ASTs."""

from __future__ import annotations

from rule_resolver.constants import (
    PATH_SEPARATOR,
    RECURSIVE_WILDCARD,
    RECURSIVE_WILDCARD_PENALTY,
    SEGMENT_WEIGHT,
    SINGLE_WILDCARD,
    SINGLE_WILDCARD_PENALTY,
    UNSUPPORTED_GLOB_CHARS,
)
from rule_resolver.errors import PatternError
from rule_resolver.patterns.models import (
    CompiledPattern,
    LiteralSegment,
    RecursiveSegment,
    Segment,
    WildcardSegment,
)


def compile_pattern(pattern: str) -> CompiledPattern:
    """Compile `pattern` or raise PatternError.

    A leading `./` or `/` is dropped. Every remaining segment must be
    non-empty, `**` must stand alone in its segment, and only `*`/`**`
    wildcards are supported.
    """
    if not isinstance(pattern, str):
        raise PatternError(pattern, "pattern must be a string")

    body = pattern.strip()
    if body.startswith("./"):
        body = body[2:]
    elif body.startswith(PATH_SEPARATOR):
        body = body[1:]
    if not body:
        raise PatternError(pattern, "pattern is empty")

    unsupported = sorted(set(body) & UNSUPPORTED_GLOB_CHARS)
    if unsupported:
        raise PatternError(pattern, f"unsupported glob syntax {''.join(unsupported)!r}")

    segments: list[Segment] = []
    for raw in body.split(PATH_SEPARATOR):
        if not raw:
            raise PatternError(pattern, "empty path segment")
        if raw == RECURSIVE_WILDCARD:
            # Consecutive `**` segments match the same paths as one.
            if segments and isinstance(segments[-1], RecursiveSegment):
                continue
            segments.append(RecursiveSegment())
        elif RECURSIVE_WILDCARD in raw:
            raise PatternError(pattern, f"'**' must be a whole segment, got {raw!r}")
        elif SINGLE_WILDCARD in raw:
            segments.append(WildcardSegment(parts=tuple(raw.split(SINGLE_WILDCARD))))
        else:
            segments.append(LiteralSegment(text=raw))

    compiled_segments = tuple(segments)
    return CompiledPattern(
        source=pattern,
        segments=compiled_segments,
        specificity=specificity(compiled_segments),
    )


def specificity(segments: tuple[Segment, ...]) -> int:
    score = 0
    for segment in segments:
        if isinstance(segment, RecursiveSegment):
            score -= RECURSIVE_WILDCARD_PENALTY
        elif isinstance(segment, WildcardSegment):
            score += SEGMENT_WEIGHT
            score += sum(len(part) for part in segment.parts)
            score -= SINGLE_WILDCARD_PENALTY * segment.wildcard_count
        else:
            score += SEGMENT_WEIGHT + len(segment.text)
    return score
