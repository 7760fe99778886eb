"""Discover rule sources in a rules directory."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from rule_resolver.constants import PATH_SEPARATOR, RULE_SUFFIXES
from rule_resolver.errors import MissingRulesDirError, UnreadableSourceError
from rule_resolver.rules.models import RuleSource


class RulesRepository:
    def __init__(self, rules_dir: Path, suffixes: Iterable[str] = RULE_SUFFIXES) -> None:
        self._rules_dir = rules_dir
        self._suffixes = tuple(suffixes)

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    def list_paths(self) -> list[Path]:
        if not self._rules_dir.is_dir():
            raise MissingRulesDirError(self._rules_dir)
        paths: list[Path] = []
        for child in self._rules_dir.rglob("*"):
            relative = child.relative_to(self._rules_dir)
            if any(part.startswith(".") for part in relative.parts):
                continue
            if child.is_file() and child.suffix in self._suffixes:
                paths.append(child)
        return sorted(paths, key=lambda item: item.relative_to(self._rules_dir).as_posix())

    def rule_id_for(self, path: Path) -> str:
        relative = path.relative_to(self._rules_dir).with_suffix("")
        return PATH_SEPARATOR.join(relative.parts)

    def list_sources(self) -> list[RuleSource]:
        sources: list[RuleSource] = []
        for path in self.list_paths():
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise UnreadableSourceError(path, str(exc)) from exc
            sources.append(
                RuleSource(rule_id=self.rule_id_for(path), text=text, origin=str(path))
            )
        return sources
