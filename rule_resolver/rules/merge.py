"""Combine activated rules into a single ordered bundle."""

from __future__ import annotations

from typing import Iterable

from rule_resolver.rules.models import RuleBundle, RuleDescriptor


def merge(activated: Iterable[RuleDescriptor]) -> RuleBundle:
    # Overlapping guidance is surfaced as-is; reconciling it is up to the renderer.
    descriptors = list(activated)
    if not descriptors:
        return RuleBundle()
    return RuleBundle(
        payload_refs=tuple(descriptor.payload_ref for descriptor in descriptors),
        has_universal=any(descriptor.is_universal for descriptor in descriptors),
        rule_ids=tuple(descriptor.id for descriptor in descriptors),
    )
