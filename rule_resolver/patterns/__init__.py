from rule_resolver.patterns.compiler import compile_pattern
from rule_resolver.patterns.matcher import matches
from rule_resolver.patterns.models import (
    CompiledPattern,
    LiteralSegment,
    RecursiveSegment,
    WildcardSegment,
)

__all__ = [
    "CompiledPattern",
    "LiteralSegment",
    "RecursiveSegment",
    "WildcardSegment",
    "compile_pattern",
    "matches",
]
