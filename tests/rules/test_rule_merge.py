"""Tests for merging activated rules into a bundle."""

from rule_resolver.rules.merge import merge
from rule_resolver.rules.models import RuleBundle
from rule_resolver.rules.resolver import resolve
from rule_resolver.rules.store import RuleStore


def test_merge_preserves_order_and_flags_universal(make_source) -> None:
    store = RuleStore.load(
        [
            make_source("general"),
            make_source("js", ["**/*.js"]),
            make_source("js-tests", ["**/*.test.js"]),
        ]
    )
    bundle = merge(resolve(store, "a.test.js"))
    assert bundle.rule_ids == ("general", "js-tests", "js")
    assert bundle.payload_refs == ("general", "js-tests", "js")
    assert bundle.has_universal is True
    assert len(bundle) == 3


def test_merge_without_universal(make_source) -> None:
    store = RuleStore.load([make_source("js", ["**/*.js"])])
    bundle = merge(resolve(store, "a.js"))
    assert bundle.has_universal is False
    assert bundle.rule_ids == ("js",)


def test_merge_keeps_overlapping_payloads(make_source) -> None:
    store = RuleStore.load(
        [
            make_source("naming-a", ["**/*.py"], body="Name things well.\n"),
            make_source("naming-b", ["**/*.py"], body="Name things well.\n"),
        ]
    )
    bundle = merge(resolve(store, "x.py"))
    assert bundle.rule_ids == ("naming-a", "naming-b")
    assert [store.payload(ref) for ref in bundle.payload_refs] == [
        "Name things well.\n",
        "Name things well.\n",
    ]


def test_merge_empty_returns_empty_bundle() -> None:
    bundle = merge([])
    assert bundle == RuleBundle()
    assert bundle.is_empty()
    assert bundle.has_universal is False
