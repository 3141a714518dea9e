from __future__ import annotations

import logging
import threading
from collections.abc import Generator, Iterable
from contextlib import AbstractContextManager, contextmanager, nullcontext
from typing import Any

from scopewire._internal.instance_store import InstanceStore
from scopewire._internal.lifecycle import LifecycleManager, ResetPolicy
from scopewire._internal.lock_mode import LockMode
from scopewire._internal.membership import MembershipTracker
from scopewire._internal.providers import Factory, ProviderLike, as_provider, provider_name
from scopewire._internal.resolver import Resolver
from scopewire._internal.scope_registry import ScopeRegistry
from scopewire._internal.settings import EngineSettings
from scopewire._internal.tokens import ScopeKind, make_token, scope_key

logger = logging.getLogger(__name__)


class DependencyEngine:
    """Register providers per scope and resolve them through the scope chain.

    Providers live in three tiers: the root scope (one per engine), router
    scopes and component scopes, each identified by a selector string. A
    dependency is looked up in the caller's component scope, then its own
    router scope, then the router that owns the caller, then the root scope;
    the first scope that knows the name wins. Each (scope, name) pair yields
    one singleton until a reset discards it.

    Construct one engine at application start and pass it to every consumer;
    there is no global accessor. Asking for the reserved engine name
    (``"DependencyEngine"`` by default) returns the engine itself so
    dependents can perform further lookups.

    A name nobody provides resolves to ``None``. Deciding what that means is
    up to the caller.
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        *,
        lock_mode: LockMode | None = None,
        reset_policy: ResetPolicy | None = None,
    ) -> None:
        """Initialize an engine with empty scopes.

        Args:
            settings: Engine settings. Defaults to ``EngineSettings()``, which
                reads ``SCOPEWIRE_*`` environment variables.
            lock_mode: Override ``settings.lock_mode``.
            reset_policy: Override ``settings.reset_policy``.

        Examples:
            .. code-block:: python

                engine = DependencyEngine()
                selective = DependencyEngine(reset_policy=ResetPolicy.SELECTIVE)

        """
        self._settings = settings if settings is not None else EngineSettings()
        self._lock_mode = lock_mode if lock_mode is not None else self._settings.lock_mode
        self._lock: AbstractContextManager[Any] = (
            threading.RLock() if self._lock_mode is LockMode.THREAD else nullcontext()
        )

        self._store = InstanceStore()
        self._membership = MembershipTracker()
        self._registry = ScopeRegistry(self._store, self._membership)
        self._resolver = Resolver(
            store=self._store,
            registry=self._registry,
            membership=self._membership,
            engine=self,
            engine_name=self._settings.engine_name,
        )
        self._lifecycle = LifecycleManager(
            store=self._store,
            registry=self._registry,
            policy=reset_policy if reset_policy is not None else self._settings.reset_policy,
        )

        self._current_selector: str | None = None
        self._current_router_selector: str | None = None

    @property
    def engine_name(self) -> str:
        return self._resolver.engine_name

    @property
    def lock_mode(self) -> LockMode:
        return self._lock_mode

    @property
    def reset_policy(self) -> ResetPolicy:
        return self._lifecycle.policy

    # region Scope Setup

    def setup_root(self, provider: ProviderLike | str, factory: Factory | None = None) -> None:
        """Register a provider in the root scope once.

        Args:
            provider: A class, function or ``Provider``. When ``factory`` is
                given, ``provider`` only supplies the name and may be a string.
            factory: Optional zero-argument callable building the instance.

        Examples:
            .. code-block:: python

                engine.setup_root(Logger)
                engine.setup_root("Clock", lambda: SystemClock())

        """
        if factory is None:
            normalized = as_provider(provider)
            name, factory = normalized.name, normalized.factory
        else:
            name = provider_name(provider)
        with self._lock:
            self._registry.setup_root(name, factory)

    def setup_component(self, selector: str, providers: Iterable[ProviderLike] = ()) -> None:
        """Declare a component scope and register its providers once.

        Args:
            selector: Component selector.
            providers: Classes, functions or ``Provider`` values scoped to the
                component. Providers already present are skipped.

        """
        with self._lock:
            self._registry.setup_component(selector, list(providers))

    def setup_router(
        self,
        components: Iterable[object],
        providers: Iterable[ProviderLike],
        selector: str,
    ) -> None:
        """Declare a router scope, its members and its providers.

        Args:
            components: Member component or router names, or classes whose
                ``__name__`` is recorded. A name re-listed by another router
                moves to that router.
            providers: Classes, functions or ``Provider`` values scoped to the
                router and visible to every member.
            selector: Router selector.

        """
        with self._lock:
            self._registry.setup_router(list(components), list(providers), selector)

    # endregion Scope Setup

    # region Resolution

    def resolve(
        self,
        name: object,
        component_selector: str | None = None,
        router_selector: str | None = None,
        owner_name: object | None = None,
    ) -> Any | None:
        """Resolve a dependency through the scope fallback chain.

        Args:
            name: Provider name, or a class/function whose ``__name__`` is used.
            component_selector: Caller's component scope, checked first.
            router_selector: Caller's own router scope, checked second.
            owner_name: Caller's own name. When the caller is a member of a
                router other than ``router_selector``, that router is checked
                third.

        Returns:
            The singleton for the first scope that provides ``name``, or
            ``None`` when no accessible scope does.

        Examples:
            .. code-block:: python

                config = engine.resolve("Config", router_selector="checkout")

        """
        key = self._normalize_name(name)
        owner = provider_name(owner_name) if owner_name is not None else None
        with self._lock:
            return self._resolver.resolve(key, component_selector, router_selector, owner)

    def get(self, name: object) -> Any | None:
        """Resolve ``name`` using the selectors set by ``set_context``.

        The parent-router hop is not applied on this path.
        """
        return self.resolve(name, self._current_selector, self._current_router_selector)

    def router_of(self, name: object) -> str | None:
        """Return the selector of the router that most recently listed ``name``."""
        return self._membership.router_of(provider_name(name))

    def is_registered(
        self,
        name: object,
        kind: ScopeKind | str = ScopeKind.ROOT,
        selector: str | None = None,
    ) -> bool:
        """Return whether ``name`` is registered in the given scope."""
        token = make_token(provider_name(name), scope_key(kind, selector))
        with self._lock:
            return self._store.is_registered(token)

    def has_scope(self, kind: ScopeKind | str, selector: str | None = None) -> bool:
        return self._registry.has_scope(kind, selector)

    # endregion Resolution

    # region Ambient Context

    @property
    def current_selector(self) -> str | None:
        return self._current_selector

    @property
    def current_router_selector(self) -> str | None:
        return self._current_router_selector

    def set_context(self, component_selector: str | None, router_selector: str | None) -> None:
        self._current_selector = component_selector
        self._current_router_selector = router_selector
        logger.debug(
            "Resolution context set to component=%r router=%r",
            component_selector,
            router_selector,
        )

    def clear_context(self) -> None:
        self.set_context(None, None)

    @contextmanager
    def context(
        self,
        component_selector: str | None,
        router_selector: str | None = None,
    ) -> Generator[DependencyEngine, None, None]:
        """Bracket an ambient resolution session.

        The previous context is restored on exit, so sessions may nest.

        Examples:
            .. code-block:: python

                with engine.context("cart", "checkout") as scoped:
                    store = scoped.get("CartStore")

        """
        previous = (self._current_selector, self._current_router_selector)
        self.set_context(component_selector, router_selector)
        try:
            yield self
        finally:
            self.set_context(*previous)

    # endregion Ambient Context

    # region Reset

    def reset_scope(self, kind: ScopeKind | str, selector: str | None = None) -> None:
        """Discard cached instances of a scope.

        Under ``ResetPolicy.GLOBAL`` (default) this flushes the whole store
        and replays every registration, so instances of every scope are
        discarded. Under ``ResetPolicy.SELECTIVE`` only the named scope is
        affected. Every provider stays resolvable either way.

        Raises:
            ScopeWireInvalidScopeError: If ``kind`` is not a known scope kind.

        """
        with self._lock:
            self._lifecycle.reset_scope(kind, selector)

    def reset_class(self, name: object) -> None:
        """Discard cached instances of ``name``, following the reset policy."""
        key = provider_name(name)
        with self._lock:
            self._lifecycle.reset_class(key)

    def reset_all(self) -> None:
        """Discard every cached instance; registrations are kept."""
        with self._lock:
            self._lifecycle.clear_instances()

    # endregion Reset

    def _normalize_name(self, name: object) -> str:
        if name is DependencyEngine or name is type(self):
            return self._resolver.engine_name
        return provider_name(name)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(lock_mode={self._lock_mode.value}, "
            f"reset_policy={self.reset_policy.value}, registrations={len(self._store)})"
        )


__all__ = ["DependencyEngine"]
