from typing import Final


APP_NAME: Final[str] = "rule-resolver"
CONFIG_FILENAME: Final[str] = "config.json"

RULES_DIRNAME: Final[str] = "rules"
RULES_DIR_ENV: Final[str] = "RULE_RESOLVER_RULES_DIR"

PATTERNS_KEY: Final[str] = "patterns"
DESCRIPTION_KEY: Final[str] = "description"

RULE_SUFFIXES: Final[tuple[str, ...]] = (
    ".md",
    ".mdc",
)

PATH_SEPARATOR: Final[str] = "/"
RECURSIVE_WILDCARD: Final[str] = "**"
SINGLE_WILDCARD: Final[str] = "*"
UNSUPPORTED_GLOB_CHARS: Final[frozenset[str]] = frozenset("?[]{}")

SEGMENT_WEIGHT: Final[int] = 100
SINGLE_WILDCARD_PENALTY: Final[int] = 10
RECURSIVE_WILDCARD_PENALTY: Final[int] = 20
