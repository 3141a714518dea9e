from __future__ import annotations

import logging
from enum import Enum

from scopewire._internal.instance_store import InstanceStore
from scopewire._internal.scope_registry import ScopeRegistry
from scopewire._internal.tokens import ScopeKind, coerce_scope_kind

logger = logging.getLogger(__name__)


class ResetPolicy(Enum):
    """Choose how ``reset_scope`` and ``reset_class`` invalidate instances."""

    GLOBAL = "global"
    """Flush the whole store and replay every registration.

    Every cached instance in every scope is discarded, whatever scope or
    class was named.
    """

    SELECTIVE = "selective"
    """Discard only the cached instances of the named scope or class."""


class LifecycleManager:
    """Invalidate cached instances while keeping every provider resolvable."""

    def __init__(
        self,
        *,
        store: InstanceStore,
        registry: ScopeRegistry,
        policy: ResetPolicy = ResetPolicy.GLOBAL,
    ) -> None:
        self._store = store
        self._registry = registry
        self._policy = policy

    @property
    def policy(self) -> ResetPolicy:
        return self._policy

    def flush_and_rebuild(self) -> int:
        """Drop the store and replay the retained registrations of every table.

        Tokens are kept in the scope tables, so values handed out before the
        flush stay valid afterwards.

        Returns:
            Number of replayed registrations.

        """
        self._store.drop_all()
        replayed = 0
        for table in self._registry.iter_tables():
            for token, factory in table.items():
                self._store.register(token, factory)
                replayed += 1
        logger.info("Flushed instance store and replayed %d registrations", replayed)
        return replayed

    def clear_instances(self) -> int:
        """Discard every cached instance; registrations are untouched."""
        cleared = self._store.clear_instances()
        logger.info("Cleared %d cached instances", cleared)
        return cleared

    def reset_scope(self, kind: ScopeKind | str, selector: str | None = None) -> None:
        """Invalidate a scope according to the configured policy.

        With ``ResetPolicy.SELECTIVE`` a router or component reset without a
        selector clears every table of that kind, and an unknown selector is
        a no-op.
        """
        scope_kind = coerce_scope_kind(kind)
        if self._policy is ResetPolicy.GLOBAL:
            logger.info("Resetting %s scope %r with a global flush", scope_kind.value, selector)
            self.flush_and_rebuild()
            return

        if scope_kind is ScopeKind.ROOT or selector is None:
            tables = list(self._registry.iter_tables(scope_kind))
        else:
            table = self._registry.table_for(scope_kind, selector)
            tables = [] if table is None else [table]

        cleared = 0
        for table in tables:
            for token in table.tokens.values():
                cleared += self._store.clear_instance(token)
        logger.info(
            "Cleared %d cached instances of %s scope %r",
            cleared,
            scope_kind.value,
            selector,
        )

    def reset_class(self, name: str) -> None:
        """Invalidate one provider name according to the configured policy."""
        if self._policy is ResetPolicy.GLOBAL:
            logger.info("Resetting '%s' with a global flush", name)
            self.flush_and_rebuild()
            return

        cleared = 0
        for table in self._registry.iter_tables():
            token = table.get(name)
            if token is not None:
                cleared += self._store.clear_instance(token)
        logger.info("Cleared %d cached instances of '%s'", cleared, name)


__all__ = ["LifecycleManager", "ResetPolicy"]
