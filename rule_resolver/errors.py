from pathlib import Path
from typing import Optional


class RuleResolverError(Exception):
    """Base user-facing application error."""


class LoadError(RuleResolverError):
    """Rule set could not be loaded; the previous store stays active."""


class SourceLoadError(LoadError):
    def __init__(self, origin: Optional[str], message: str) -> None:
        self.origin = origin
        self.message = message
        super().__init__(f"{message}: {origin}" if origin else message)


class InvalidHeaderError(SourceLoadError):
    def __init__(self, origin: Optional[str], detail: str) -> None:
        self.detail = detail
        super().__init__(origin=origin, message=f"Invalid rule header ({detail})")


class DuplicateRuleError(SourceLoadError):
    def __init__(self, origin: Optional[str], rule_id: str) -> None:
        self.rule_id = rule_id
        super().__init__(origin=origin, message=f"Duplicate rule id '{rule_id}'")


class UnreadableSourceError(SourceLoadError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(origin=str(path), message=f"Cannot read rule source ({detail})")


class MissingRulesDirError(SourceLoadError):
    def __init__(self, path: Path) -> None:
        super().__init__(origin=str(path), message="Rules directory does not exist")


class PatternError(RuleResolverError):
    def __init__(self, pattern: object, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r} ({reason})")


class ResolutionError(RuleResolverError):
    """Programming error: resolution was attempted without a valid store."""


class InvalidConfigError(RuleResolverError):
    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config ({detail}): {path}")
