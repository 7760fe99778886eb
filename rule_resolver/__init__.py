from rule_resolver.errors import (
    LoadError,
    PatternError,
    ResolutionError,
    RuleResolverError,
)
from rule_resolver.patterns import compile_pattern, matches
from rule_resolver.rules import (
    RuleBundle,
    RuleDescriptor,
    RuleScope,
    RuleSource,
    RuleStore,
    RuleStoreHolder,
    merge,
    resolve,
)
from rule_resolver.utils import normalize_path

__version__ = "0.1.0"

__all__ = [
    "LoadError",
    "PatternError",
    "ResolutionError",
    "RuleBundle",
    "RuleDescriptor",
    "RuleResolverError",
    "RuleScope",
    "RuleSource",
    "RuleStore",
    "RuleStoreHolder",
    "compile_pattern",
    "matches",
    "merge",
    "normalize_path",
    "resolve",
]
