from rule_resolver.rules.holder import RuleStoreHolder
from rule_resolver.rules.merge import merge
from rule_resolver.rules.models import (
    LoadWarning,
    RuleBundle,
    RuleDescriptor,
    RuleScope,
    RuleSource,
)
from rule_resolver.rules.repository import RulesRepository
from rule_resolver.rules.resolver import resolve
from rule_resolver.rules.store import RuleStore

__all__ = [
    "LoadWarning",
    "RuleBundle",
    "RuleDescriptor",
    "RuleScope",
    "RuleSource",
    "RuleStore",
    "RuleStoreHolder",
    "RulesRepository",
    "merge",
    "resolve",
]
