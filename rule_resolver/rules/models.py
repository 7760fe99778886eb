"""Rule data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from rule_resolver.patterns.models import CompiledPattern


class RuleScope(str, Enum):
    UNIVERSAL = "universal"
    CONDITIONAL = "conditional"


@dataclass(frozen=True)
class RuleSource:
    rule_id: str
    text: str
    origin: Optional[str] = None


@dataclass(frozen=True)
class RuleHeader:
    fields: dict[str, Any]
    body: str


@dataclass(frozen=True)
class RuleDescriptor:
    id: str
    patterns: tuple[str, ...]
    scope: RuleScope
    payload_ref: str
    priority: int = 0
    description: str = ""
    compiled: tuple[Optional[CompiledPattern], ...] = field(
        default=(), compare=False, repr=False
    )

    @property
    def is_universal(self) -> bool:
        return self.scope == RuleScope.UNIVERSAL

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "scope": self.scope.value,
            "priority": self.priority,
            "patterns": list(self.patterns),
            "payload_ref": self.payload_ref,
            "description": self.description,
        }


@dataclass(frozen=True)
class LoadWarning:
    rule_id: str
    pattern: str
    message: str

    def __str__(self) -> str:
        return f"{self.rule_id}: {self.message}"


@dataclass(frozen=True)
class RuleBundle:
    payload_refs: tuple[str, ...] = ()
    has_universal: bool = False
    rule_ids: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not self.payload_refs

    def __len__(self) -> int:
        return len(self.payload_refs)
