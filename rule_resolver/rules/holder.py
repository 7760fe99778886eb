"""Publish the current rule store and swap it on reload."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from rule_resolver.errors import LoadError, ResolutionError
from rule_resolver.rules.store import RuleStore

logger = logging.getLogger(__name__)


class RuleStoreHolder:
    """Holds one store snapshot.

    Readers take `current` without locking. `reload` builds the replacement
    first and publishes it with a single assignment, so a failed reload
    leaves the previous snapshot in place.
    """

    def __init__(self, store: Optional[RuleStore] = None) -> None:
        self._store = store
        self._reload_lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._store is not None

    @property
    def current(self) -> RuleStore:
        store = self._store
        if store is None:
            raise ResolutionError("No rule store has been loaded")
        return store

    def publish(self, store: RuleStore) -> RuleStore:
        self._store = store
        return store

    def reload(self, loader: Callable[[], RuleStore]) -> RuleStore:
        with self._reload_lock:
            try:
                store = loader()
            except LoadError as exc:
                logger.error("Rule reload failed, keeping previous store: %s", exc)
                raise
            logger.info("Rule store reloaded with %d rules", len(store))
            return self.publish(store)
