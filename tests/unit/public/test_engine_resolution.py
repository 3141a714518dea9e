from __future__ import annotations

from scopewire import DependencyEngine, Provider, ScopeKind


class Logger:
    pass


class Shared:
    pass


class Config:
    pass


class Counter:
    built = 0

    def __init__(self) -> None:
        type(self).built += 1


def test_root_provider_is_singleton_across_callers(engine: DependencyEngine) -> None:
    engine.setup_root(Logger)

    first = engine.resolve("Logger")
    second = engine.resolve(Logger)

    assert isinstance(first, Logger)
    assert first is second


def test_root_provider_is_shared_by_different_components(engine: DependencyEngine) -> None:
    engine.setup_root(Logger)
    engine.setup_component("a")
    engine.setup_component("b")

    assert engine.resolve("Logger", "a") is engine.resolve("Logger", "b")


def test_repeated_registration_constructs_at_most_once(engine: DependencyEngine) -> None:
    Counter.built = 0
    engine.setup_component("a", [Counter])
    engine.setup_component("a", [Counter])

    engine.resolve("Counter", "a")
    engine.resolve("Counter", "a")

    assert Counter.built == 1
    assert engine.is_registered("Counter", ScopeKind.COMPONENT, "a")


def test_component_provider_is_invisible_to_other_components(engine: DependencyEngine) -> None:
    engine.setup_component("a", [Shared])
    engine.setup_component("b")

    assert engine.resolve("Shared", "a") is not None
    assert engine.resolve("Shared", "b") is None


def test_unknown_name_resolves_to_none(engine: DependencyEngine) -> None:
    assert engine.resolve("Missing") is None
    assert engine.resolve("Missing", "unknown-component", "unknown-router", "Owner") is None


def test_component_overrides_router_overrides_root(engine: DependencyEngine) -> None:
    engine.setup_root(Shared)
    engine.setup_router(["Page"], [Shared], "R")
    engine.setup_component("C", [Shared])

    from_component = engine.resolve("Shared", "C", "R")
    from_router = engine.resolve("Shared", None, "R")
    from_root = engine.resolve("Shared")

    assert len({id(from_component), id(from_router), id(from_root)}) == 3
    assert from_component is engine.resolve("Shared", "C")
    assert from_router is engine.resolve("Shared", "unknown", "R")
    assert from_root is engine.resolve("Shared", "unknown", "unknown")


def test_member_component_gets_router_instance(engine: DependencyEngine) -> None:
    engine.setup_router(["Member"], [Shared], "R")
    engine.setup_component("member")
    engine.setup_component("sibling")

    shared = engine.resolve("Shared", "member", engine.router_of("Member"), "Member")

    assert shared is engine.resolve("Shared", None, "R")
    assert engine.router_of("Sibling") is None
    assert engine.resolve("Shared", "sibling", engine.router_of("Sibling"), "Sibling") is None


def test_member_component_finds_router_through_owner_name(engine: DependencyEngine) -> None:
    engine.setup_router(["Member"], [Shared], "R")

    assert engine.resolve("Shared", "member", None, "Member") is engine.resolve("Shared", None, "R")


def test_nested_router_resolves_from_parent_router(engine: DependencyEngine) -> None:
    engine.setup_router(["R2"], [Config], "R1")
    engine.setup_router(["Inner"], [], "R2")

    config = engine.resolve("Config", None, "R2", "R2")

    assert isinstance(config, Config)
    assert config is engine.resolve("Config", None, "R1")
    assert engine.resolve("Config", None, "R2") is None


def test_own_router_wins_over_parent_router(engine: DependencyEngine) -> None:
    engine.setup_router(["R2"], [Config], "R1")
    engine.setup_router([], [Config], "R2")

    own = engine.resolve("Config", None, "R2", "R2")

    assert own is not engine.resolve("Config", None, "R1")
    assert own is engine.resolve("Config", None, "R2")


def test_membership_may_precede_router_providers(engine: DependencyEngine) -> None:
    engine.setup_router(["Member"], [], "R")
    assert engine.resolve("Shared", None, None, "Member") is None

    engine.setup_router([], [Shared], "R")

    assert isinstance(engine.resolve("Shared", None, None, "Member"), Shared)


def test_router_of_reflects_latest_router(engine: DependencyEngine) -> None:
    engine.setup_router(["Page"], [], "first")
    engine.setup_router(["Page"], [], "second")

    assert engine.router_of("Page") == "second"


def test_reserved_name_resolves_to_engine(engine: DependencyEngine) -> None:
    assert engine.resolve("DependencyEngine") is engine
    assert engine.resolve(DependencyEngine, "any-component") is engine


def test_names_alias_across_unrelated_types(engine: DependencyEngine) -> None:
    engine.setup_root(Provider(name="Store", factory=Logger))
    engine.setup_root(Provider(name="Store", factory=Config))

    assert isinstance(engine.resolve("Store"), Logger)


def test_setup_root_with_name_and_factory(engine: DependencyEngine) -> None:
    engine.setup_root("Clock", lambda: "tick")

    assert engine.resolve("Clock") == "tick"
    assert engine.is_registered("Clock")


def test_factory_may_resolve_through_engine(engine: DependencyEngine) -> None:
    engine.setup_root(Logger)
    engine.setup_root("Service", lambda: ("service", engine.resolve("Logger")))

    name, logger = engine.resolve("Service")

    assert name == "service"
    assert logger is engine.resolve("Logger")


def test_has_scope(engine: DependencyEngine) -> None:
    engine.setup_component("cart")

    assert engine.has_scope(ScopeKind.ROOT)
    assert engine.has_scope("component", "cart")
    assert not engine.has_scope("router", "cart")
