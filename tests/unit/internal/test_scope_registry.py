from __future__ import annotations

import pytest

from scopewire._internal.instance_store import InstanceStore
from scopewire._internal.membership import MembershipTracker
from scopewire._internal.providers import Provider
from scopewire._internal.scope_registry import ScopeRegistry
from scopewire._internal.tokens import ScopeKind, make_token
from scopewire.exceptions import ScopeWireInvalidProviderError, ScopeWireScopeNotFoundError


class Logger:
    pass


class Cart:
    pass


@pytest.fixture()
def store() -> InstanceStore:
    return InstanceStore()


@pytest.fixture()
def membership() -> MembershipTracker:
    return MembershipTracker()


@pytest.fixture()
def registry(store: InstanceStore, membership: MembershipTracker) -> ScopeRegistry:
    return ScopeRegistry(store, membership)


def test_setup_root_registers_once(registry: ScopeRegistry, store: InstanceStore) -> None:
    first = registry.setup_root("Logger", Logger)
    second = registry.setup_root("Logger", Cart)

    assert first == second == make_token("Logger", "root")
    assert len(store) == 1
    assert isinstance(store.resolve(first), Logger)


def test_setup_component_creates_table_lazily(registry: ScopeRegistry) -> None:
    assert registry.table_for(ScopeKind.COMPONENT, "cart") is None

    table = registry.setup_component("cart", [Cart])

    assert registry.table_for(ScopeKind.COMPONENT, "cart") is table
    assert table.get("Cart") == make_token("Cart", "component:cart")
    assert registry.has_scope("component", "cart")


def test_setup_component_skips_known_providers(
    registry: ScopeRegistry,
    store: InstanceStore,
) -> None:
    registry.setup_component("cart", [Cart])
    registry.setup_component("cart", [Cart, Logger])

    table = registry.require_table(ScopeKind.COMPONENT, "cart")
    assert list(table.tokens) == ["Cart", "Logger"]
    assert len(store) == 2


def test_setup_component_accepts_explicit_provider(registry: ScopeRegistry) -> None:
    table = registry.setup_component("cart", [Provider(name="Clock", factory=lambda: 42)])

    token = table.get("Clock")
    assert token is not None
    assert table.factories["Clock"]() == 42


def test_setup_component_rejects_non_callable_provider(registry: ScopeRegistry) -> None:
    with pytest.raises(ScopeWireInvalidProviderError):
        registry.setup_component("cart", ["not-callable"])  # type: ignore[list-item]


def test_setup_router_records_membership_by_name_and_reference(
    registry: ScopeRegistry,
    membership: MembershipTracker,
) -> None:
    registry.setup_router([Cart, "Checkout"], [Logger], "shop")

    assert membership.router_of("Cart") == "shop"
    assert membership.router_of("Checkout") == "shop"
    table = registry.require_table(ScopeKind.ROUTER, "shop")
    assert table.get("Logger") == make_token("Logger", "router:shop")


def test_same_name_in_several_scopes_gets_distinct_tokens(registry: ScopeRegistry) -> None:
    root_token = registry.setup_root("Logger", Logger)
    router_token = registry.setup_router([], [Logger], "shop").get("Logger")
    component_token = registry.setup_component("cart", [Logger]).get("Logger")

    assert len({root_token, router_token, component_token}) == 3


def test_require_table_fails_fast_for_unknown_scope(registry: ScopeRegistry) -> None:
    with pytest.raises(ScopeWireScopeNotFoundError, match="router scope for selector 'missing'"):
        registry.require_table(ScopeKind.ROUTER, "missing")


def test_root_table_always_exists(registry: ScopeRegistry) -> None:
    assert registry.table_for(ScopeKind.ROOT) is not None
    assert registry.table_for(ScopeKind.ROUTER) is None


def test_iter_tables_orders_root_routers_components(registry: ScopeRegistry) -> None:
    registry.setup_component("cart", [Cart])
    registry.setup_router([], [Logger], "shop")

    kinds = [table.kind for table in registry.iter_tables()]

    assert kinds == [ScopeKind.ROOT, ScopeKind.ROUTER, ScopeKind.COMPONENT]
    assert [table.selector for table in registry.iter_tables(ScopeKind.COMPONENT)] == ["cart"]
    assert [table.selector for table in registry.iter_tables(ScopeKind.ROUTER)] == ["shop"]
    assert [table.selector for table in registry.iter_tables("root")] == [None]


def test_repeated_setup_returns_the_declared_table(registry: ScopeRegistry) -> None:
    router_table = registry.setup_router([], [Logger], "shop")
    component_table = registry.setup_component("cart", [Cart])

    assert registry.setup_router([Cart], [], "shop") is router_table
    assert registry.setup_component("cart") is component_table
    assert registry.require_table(ScopeKind.ROUTER, "shop") is router_table
    assert registry.require_table("component", "cart") is component_table
