"""Tests for glob pattern compilation."""

import pytest

from rule_resolver.errors import PatternError
from rule_resolver.patterns.compiler import compile_pattern
from rule_resolver.patterns.models import (
    LiteralSegment,
    RecursiveSegment,
    WildcardSegment,
)


def test_compile_segments() -> None:
    compiled = compile_pattern("src/**/*.ts")
    assert compiled.source == "src/**/*.ts"
    assert compiled.segments == (
        LiteralSegment("src"),
        RecursiveSegment(),
        WildcardSegment(("", ".ts")),
    )


def test_compile_drops_leading_dot_slash_and_slash() -> None:
    plain = compile_pattern("src/*.py")
    assert compile_pattern("./src/*.py").segments == plain.segments
    assert compile_pattern("/src/*.py").segments == plain.segments


def test_compile_collapses_consecutive_recursive_segments() -> None:
    compiled = compile_pattern("**/**/README.md")
    assert compiled.segments == (RecursiveSegment(), LiteralSegment("README.md"))


@pytest.mark.parametrize(
    "pattern",
    ["", "   ", "/", "src//a.py", "src/", "src/**.ts", "a**/b", "src/?.py", "{a,b}/*.ts", "[ab].py"],
)
def test_compile_rejects_malformed(pattern: str) -> None:
    with pytest.raises(PatternError):
        compile_pattern(pattern)


def test_compile_rejects_non_string() -> None:
    with pytest.raises(PatternError) as excinfo:
        compile_pattern(42)  # type: ignore[arg-type]
    assert excinfo.value.pattern == 42


def test_specificity_prefers_longer_literal_suffix() -> None:
    assert compile_pattern("**/*.test.js").specificity == 78
    assert compile_pattern("**/*.js").specificity == 73


def test_specificity_prefers_more_segments() -> None:
    assert compile_pattern("src/**/*.ts").specificity > compile_pattern("**/*.ts").specificity


def test_specificity_prefers_literals_over_wildcards() -> None:
    assert compile_pattern("src/main.py").specificity > compile_pattern("src/*.py").specificity
