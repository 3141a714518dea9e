from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from scopewire._internal.instance_store import InstanceStore
from scopewire._internal.membership import MembershipTracker
from scopewire._internal.providers import Factory, Provider, ProviderLike, as_provider, provider_name
from scopewire._internal.tokens import ScopeKind, Token, coerce_scope_kind, make_token, scope_key
from scopewire.exceptions import ScopeWireScopeNotFoundError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScopeTable:
    """Map provider names to tokens for one scope.

    The table also retains each provider's factory so registrations can be
    replayed into the instance store after a full flush, without asking the
    original callers to declare their providers again.
    """

    kind: ScopeKind
    selector: str | None
    key: str
    tokens: dict[str, Token] = field(default_factory=dict)
    factories: dict[str, Factory] = field(default_factory=dict)

    def get(self, name: str) -> Token | None:
        return self.tokens.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.tokens

    def __len__(self) -> int:
        return len(self.tokens)

    def items(self) -> Iterator[tuple[Token, Factory]]:
        """Yield retained ``(token, factory)`` pairs in registration order."""
        for name, token in self.tokens.items():
            yield token, self.factories[name]


class ScopeRegistry:
    """Keep the root, router and component scope tables.

    Setup calls are idempotent: a provider already present in a table is
    skipped, so repeated construction of the same component does not
    re-register anything.
    """

    def __init__(self, store: InstanceStore, membership: MembershipTracker) -> None:
        self._store = store
        self._membership = membership
        self._root = ScopeTable(kind=ScopeKind.ROOT, selector=None, key=scope_key(ScopeKind.ROOT))
        self._routers: dict[str, ScopeTable] = {}
        self._components: dict[str, ScopeTable] = {}

    # region Setup

    def setup_root(self, name: str, factory: Factory) -> Token:
        """Register a provider in the root scope once.

        Args:
            name: Provider name.
            factory: Zero-argument callable building the instance.

        Returns:
            The root-scope token for ``name``.

        """
        self._add(self._root, Provider(name=name, factory=factory))
        return self._root.tokens[name]

    def setup_component(self, selector: str, providers: Iterable[ProviderLike] = ()) -> ScopeTable:
        """Create the component table for ``selector`` and register its providers.

        Args:
            selector: Component selector.
            providers: Classes, functions or ``Provider`` values to register
                in the component scope.

        Returns:
            The component scope table.

        """
        self._ensure_table(ScopeKind.COMPONENT, selector)
        table = self.require_table(ScopeKind.COMPONENT, selector)
        for provider in providers:
            self._add(table, as_provider(provider))
        return table

    def setup_router(
        self,
        components: Iterable[object],
        providers: Iterable[ProviderLike],
        selector: str,
    ) -> ScopeTable:
        """Create the router table for ``selector``, record members, register providers.

        Args:
            components: Member names, or classes/references whose ``__name__``
                is recorded. Routers may list other routers to nest them.
            providers: Classes, functions or ``Provider`` values to register
                in the router scope.
            selector: Router selector.

        Returns:
            The router scope table.

        """
        self._ensure_table(ScopeKind.ROUTER, selector)
        table = self.require_table(ScopeKind.ROUTER, selector)
        for member in components:
            self._membership.record(provider_name(member), selector)
        for provider in providers:
            self._add(table, as_provider(provider))
        return table

    # endregion Setup

    # region Lookup

    def table_for(self, kind: ScopeKind | str, selector: str | None = None) -> ScopeTable | None:
        """Return the table for a scope, or ``None`` when it was never set up."""
        scope_kind = coerce_scope_kind(kind)
        if scope_kind is ScopeKind.ROOT:
            return self._root
        if selector is None:
            return None
        return self._tables_of(scope_kind).get(selector)

    def require_table(self, kind: ScopeKind | str, selector: str | None = None) -> ScopeTable:
        """Return the table for a scope that must already exist.

        Raises:
            ScopeWireScopeNotFoundError: If the scope was never set up.

        """
        table = self.table_for(kind, selector)
        if table is None:
            msg = (
                f"No {coerce_scope_kind(kind).value} scope for selector {selector!r}; "
                "it must be set up before use."
            )
            raise ScopeWireScopeNotFoundError(msg)
        return table

    def has_scope(self, kind: ScopeKind | str, selector: str | None = None) -> bool:
        return self.table_for(kind, selector) is not None

    def iter_tables(self, kind: ScopeKind | str | None = None) -> Iterator[ScopeTable]:
        """Yield tables: root first, then routers, then components.

        Args:
            kind: Restrict iteration to one scope kind.

        """
        scope_kind = None if kind is None else coerce_scope_kind(kind)
        if scope_kind in (None, ScopeKind.ROOT):
            yield self._root
        if scope_kind in (None, ScopeKind.ROUTER):
            yield from self._routers.values()
        if scope_kind in (None, ScopeKind.COMPONENT):
            yield from self._components.values()

    # endregion Lookup

    def _tables_of(self, kind: ScopeKind) -> dict[str, ScopeTable]:
        if kind is ScopeKind.ROUTER:
            return self._routers
        return self._components

    def _ensure_table(self, kind: ScopeKind, selector: str) -> None:
        tables = self._tables_of(kind)
        if selector not in tables:
            tables[selector] = ScopeTable(kind=kind, selector=selector, key=scope_key(kind, selector))
            logger.debug("Created %s scope '%s'", kind.value, selector)

    def _add(self, table: ScopeTable, provider: Provider) -> None:
        if provider.name in table:
            return
        token = make_token(provider.name, table.key)
        table.tokens[provider.name] = token
        table.factories[provider.name] = provider.factory
        self._store.register(token, provider.factory)


__all__ = ["ScopeRegistry", "ScopeTable"]
