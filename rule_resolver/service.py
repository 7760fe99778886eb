from pathlib import Path
from typing import Optional

from rule_resolver.config import ResolverConfig
from rule_resolver.rules.holder import RuleStoreHolder
from rule_resolver.rules.merge import merge
from rule_resolver.rules.models import RuleBundle, RuleDescriptor
from rule_resolver.rules.repository import RulesRepository
from rule_resolver.rules.resolver import resolve
from rule_resolver.rules.store import RuleStore
from rule_resolver.utils import normalize_path, relative_rule_path


class RuleActivationService:
    def __init__(
        self,
        repository: RulesRepository,
        patterns_key: str,
        holder: Optional[RuleStoreHolder] = None,
    ) -> None:
        self._repository = repository
        self._patterns_key = patterns_key
        self._holder = holder or RuleStoreHolder()

    @classmethod
    def from_config(cls, config: ResolverConfig) -> "RuleActivationService":
        return cls(
            repository=RulesRepository(config.rules_dir, suffixes=config.suffixes),
            patterns_key=config.patterns_key,
        )

    @property
    def repository(self) -> RulesRepository:
        return self._repository

    @property
    def store(self) -> RuleStore:
        return self._holder.current

    def load_store(self) -> RuleStore:
        return RuleStore.load(self._repository.list_sources(), patterns_key=self._patterns_key)

    def reload(self) -> RuleStore:
        return self._holder.reload(self.load_store)

    def ensure_loaded(self) -> RuleStore:
        if not self._holder.loaded:
            return self.reload()
        return self._holder.current

    def activated_for(self, path: str, root: Optional[Path] = None) -> list[RuleDescriptor]:
        return resolve(self.ensure_loaded(), self.normalize(path, root))

    def bundle_for(self, path: str, root: Optional[Path] = None) -> RuleBundle:
        return merge(self.activated_for(path, root))

    @staticmethod
    def normalize(path: str, root: Optional[Path] = None) -> str:
        if not path:
            return ""
        if root is not None:
            candidate = Path(path)
            if not candidate.is_absolute():
                candidate = Path.cwd() / candidate
            return relative_rule_path(candidate, root)
        return normalize_path(path)
