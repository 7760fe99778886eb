"""Parse rule sources with YAML frontmatter."""

from __future__ import annotations

import re

import yaml

from rule_resolver.errors import InvalidHeaderError
from rule_resolver.rules.models import RuleHeader, RuleSource

_OPENING_RE = re.compile(r"\A---[ \t]*\r?\n")
_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\r?\Z)", re.DOTALL | re.MULTILINE
)


def parse_header(source: RuleSource) -> RuleHeader:
    text = source.text.lstrip("\ufeff")

    match = _FRONTMATTER_RE.match(text)
    if not match:
        if _OPENING_RE.match(text):
            raise InvalidHeaderError(_origin(source), "unterminated frontmatter")
        return RuleHeader(fields={}, body=text)

    try:
        raw = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        raise InvalidHeaderError(_origin(source), f"YAML error: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidHeaderError(
            _origin(source), f"frontmatter must be a mapping, got {type(raw).__name__}"
        )
    return RuleHeader(fields=raw, body=text[match.end() :])


def parse_patterns(source: RuleSource, header: RuleHeader, key: str) -> tuple[str, ...]:
    raw = header.fields.get(key)
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise InvalidHeaderError(
            _origin(source), f"'{key}' must be a list, got {type(raw).__name__}"
        )

    patterns: list[str] = []
    for index, item in enumerate(raw):
        if not isinstance(item, str):
            raise InvalidHeaderError(
                _origin(source),
                f"'{key}[{index}]' must be a string, got {type(item).__name__}",
            )
        patterns.append(item)
    return tuple(patterns)


def _origin(source: RuleSource) -> str:
    return source.origin or source.rule_id
