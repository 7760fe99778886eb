"""Determine which rules activate for a file path."""

from __future__ import annotations

from typing import Optional

from rule_resolver.errors import ResolutionError
from rule_resolver.patterns.matcher import matches
from rule_resolver.rules.models import RuleDescriptor
from rule_resolver.rules.store import RuleStore


def resolve(store: Optional[RuleStore], path: str) -> list[RuleDescriptor]:
    """Return the descriptors active for `path`.

    Universal rules come first in load order, followed by matching
    conditional rules sorted by descending priority with load order
    breaking ties. `path` must already be normalized; an empty path
    activates universal rules only.
    """
    if store is None:
        raise ResolutionError("Cannot resolve rules without a loaded store")

    universal: list[RuleDescriptor] = []
    conditional: list[tuple[int, int, RuleDescriptor]] = []
    for position, descriptor in enumerate(store.all()):
        if descriptor.is_universal:
            universal.append(descriptor)
        elif path and is_active(descriptor, path):
            conditional.append((-descriptor.priority, position, descriptor))

    conditional.sort(key=lambda item: (item[0], item[1]))
    return universal + [item[2] for item in conditional]


def is_active(descriptor: RuleDescriptor, path: str) -> bool:
    if descriptor.is_universal:
        return True
    if descriptor.compiled:
        return any(matches(compiled, path) for compiled in descriptor.compiled)
    return any(matches(pattern, path) for pattern in descriptor.patterns)
