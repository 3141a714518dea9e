from __future__ import annotations

import logging
from typing import Any

from scopewire._internal.instance_store import InstanceStore
from scopewire._internal.membership import MembershipTracker
from scopewire._internal.scope_registry import ScopeRegistry, ScopeTable
from scopewire._internal.tokens import ScopeKind

logger = logging.getLogger(__name__)


class Resolver:
    """Look a provider name up through the scope fallback chain.

    Order, first hit wins: the reserved engine name, the component scope,
    the caller's own router scope, the router that owns ``owner_name``
    (parent-router hop), then the root scope. A miss returns ``None``.
    """

    def __init__(
        self,
        *,
        store: InstanceStore,
        registry: ScopeRegistry,
        membership: MembershipTracker,
        engine: object,
        engine_name: str,
    ) -> None:
        self._store = store
        self._registry = registry
        self._membership = membership
        self._engine = engine
        self._engine_name = engine_name

    @property
    def engine_name(self) -> str:
        return self._engine_name

    def resolve(
        self,
        name: str,
        component_selector: str | None = None,
        router_selector: str | None = None,
        owner_name: str | None = None,
    ) -> Any | None:
        if name == self._engine_name:
            return self._engine

        if component_selector:
            table = self._registry.table_for(ScopeKind.COMPONENT, component_selector)
            found, instance = self._resolve_in(table, name)
            if found:
                return instance

        if router_selector:
            table = self._registry.table_for(ScopeKind.ROUTER, router_selector)
            found, instance = self._resolve_in(table, name)
            if found:
                return instance

        parent_selector = self._membership.router_of(owner_name) if owner_name else None
        if parent_selector and parent_selector != router_selector:
            table = self._registry.table_for(ScopeKind.ROUTER, parent_selector)
            found, instance = self._resolve_in(table, name)
            if found:
                return instance

        found, instance = self._resolve_in(self._registry.table_for(ScopeKind.ROOT), name)
        if found:
            return instance

        logger.debug(
            "No provider for '%s' (component=%r, router=%r, owner=%r)",
            name,
            component_selector,
            router_selector,
            owner_name,
        )
        return None

    def _resolve_in(self, table: ScopeTable | None, name: str) -> tuple[bool, Any | None]:
        if table is None:
            return False, None
        token = table.get(name)
        if token is None or not self._store.is_registered(token):
            return False, None
        return True, self._store.resolve(token)


__all__ = ["Resolver"]
