"""Immutable store of parsed rule descriptors."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from rule_resolver.constants import DESCRIPTION_KEY, PATTERNS_KEY
from rule_resolver.errors import DuplicateRuleError, InvalidHeaderError, PatternError
from rule_resolver.patterns.compiler import compile_pattern
from rule_resolver.patterns.models import CompiledPattern
from rule_resolver.rules.models import (
    LoadWarning,
    RuleDescriptor,
    RuleScope,
    RuleSource,
)
from rule_resolver.rules.parser import parse_header, parse_patterns

logger = logging.getLogger(__name__)


class RuleStore:
    """Descriptors in load order, their payload bodies and any load warnings.

    Built once by `load()` and never mutated afterwards; reloading means
    building a new store.
    """

    __slots__ = ("_descriptors", "_by_id", "_payloads", "_warnings")

    def __init__(
        self,
        descriptors: Iterable[RuleDescriptor] = (),
        payloads: Optional[Mapping[str, str]] = None,
        warnings: Iterable[LoadWarning] = (),
    ) -> None:
        ordered = tuple(descriptors)
        by_id: dict[str, RuleDescriptor] = {}
        for descriptor in ordered:
            if descriptor.is_universal == bool(descriptor.patterns):
                detail = f"{descriptor.scope.value} rule with {len(descriptor.patterns)} patterns"
                raise InvalidHeaderError(descriptor.payload_ref, detail)
            if descriptor.id in by_id:
                raise DuplicateRuleError(descriptor.payload_ref, descriptor.id)
            by_id[descriptor.id] = descriptor

        self._descriptors = ordered
        self._by_id = MappingProxyType(by_id)
        self._payloads = MappingProxyType(dict(payloads or {}))
        self._warnings = tuple(warnings)

    @classmethod
    def load(
        cls, sources: Iterable[RuleSource], patterns_key: str = PATTERNS_KEY
    ) -> "RuleStore":
        """Build a store from `sources`, failing as a whole on the first bad header."""
        descriptors: list[RuleDescriptor] = []
        payloads: dict[str, str] = {}
        warnings: list[LoadWarning] = []
        seen: set[str] = set()

        for source in sources:
            if source.rule_id in seen:
                raise DuplicateRuleError(source.origin or source.rule_id, source.rule_id)
            seen.add(source.rule_id)

            descriptor, body, source_warnings = _build_descriptor(source, patterns_key)
            descriptors.append(descriptor)
            payloads[descriptor.payload_ref] = body
            warnings.extend(source_warnings)

        for warning in warnings:
            logger.warning("Rule '%s' pattern never matches: %s", warning.rule_id, warning.message)
        logger.debug("Loaded %d rule descriptors", len(descriptors))
        return cls(descriptors=descriptors, payloads=payloads, warnings=warnings)

    def all(self) -> tuple[RuleDescriptor, ...]:
        return self._descriptors

    def get(self, rule_id: str) -> Optional[RuleDescriptor]:
        return self._by_id.get(rule_id)

    def payload(self, payload_ref: str) -> Optional[str]:
        return self._payloads.get(payload_ref)

    @property
    def warnings(self) -> tuple[LoadWarning, ...]:
        return self._warnings

    def __iter__(self) -> Iterator[RuleDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id


def _build_descriptor(
    source: RuleSource, patterns_key: str
) -> tuple[RuleDescriptor, str, list[LoadWarning]]:
    header = parse_header(source)
    patterns = parse_patterns(source, header, patterns_key)

    compiled: list[Optional[CompiledPattern]] = []
    warnings: list[LoadWarning] = []
    for pattern in patterns:
        try:
            compiled.append(compile_pattern(pattern))
        except PatternError as exc:
            compiled.append(None)
            warnings.append(
                LoadWarning(rule_id=source.rule_id, pattern=pattern, message=str(exc))
            )

    priority = max(
        (item.specificity for item in compiled if item is not None), default=0
    )
    description = header.fields.get(DESCRIPTION_KEY, "")
    descriptor = RuleDescriptor(
        id=source.rule_id,
        patterns=patterns,
        scope=RuleScope.CONDITIONAL if patterns else RuleScope.UNIVERSAL,
        payload_ref=source.origin or source.rule_id,
        priority=priority,
        description=str(description) if description is not None else "",
        compiled=tuple(compiled),
    )
    return descriptor, header.body, warnings
