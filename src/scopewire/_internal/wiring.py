from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Literal, TypeVar, overload

from scopewire._internal.providers import Provider, ProviderLike, provider_name
from scopewire.exceptions import ScopeWireInvalidEntityError

if TYPE_CHECKING:
    from scopewire._internal.engine import DependencyEngine

C = TypeVar("C", bound=type[Any])
T = TypeVar("T")

logger = logging.getLogger(__name__)

MANIFEST_ATTR = "__scopewire_manifest__"
DEPENDENCIES_ATTR = "__dependencies__"


class EntityKind(Enum):
    """Describe the role a decorated class plays in the scope tree."""

    INJECTABLE = "injectable"
    COMPONENT = "component"
    ROUTER = "router"


@dataclass(frozen=True, slots=True)
class EntityManifest:
    """Static description of a decorated class.

    ``dependencies`` is the ordered list of provider names passed
    positionally to the class constructor.
    """

    kind: EntityKind
    dependencies: tuple[str, ...] = ()
    selector: str | None = None
    provided_in: Literal["root"] | None = None
    providers: tuple[ProviderLike, ...] = ()
    components: tuple[object, ...] = ()


def manifest_of(entity: object) -> EntityManifest | None:
    """Return the manifest attached to ``entity`` itself, ignoring base classes."""
    namespace = getattr(entity, "__dict__", {})
    manifest = namespace.get(MANIFEST_ATTR)
    return manifest if isinstance(manifest, EntityManifest) else None


def _dependency_names(entity: object, dependencies: Iterable[object] | str | None) -> tuple[str, ...]:
    if dependencies is None:
        dependencies = getattr(entity, DEPENDENCIES_ATTR, ())
    # A lone name is one dependency, not a sequence of characters.
    if isinstance(dependencies, str):
        dependencies = (dependencies,)
    return tuple(provider_name(dependency) for dependency in dependencies)


def _attach(entity: C, manifest: EntityManifest) -> C:
    setattr(entity, MANIFEST_ATTR, manifest)
    return entity


@overload
def injectable(
    entity: C,
    *,
    provided_in: Literal["root"] | None = None,
    dependencies: Iterable[object] | str | None = None,
) -> C: ...


@overload
def injectable(
    entity: None = None,
    *,
    provided_in: Literal["root"] | None = None,
    dependencies: Iterable[object] | str | None = None,
) -> Callable[[C], C]: ...


def injectable(
    entity: C | None = None,
    *,
    provided_in: Literal["root"] | None = None,
    dependencies: Iterable[object] | str | None = None,
) -> C | Callable[[C], C]:
    """Mark a class as a provider with an explicit dependency manifest.

    Args:
        entity: Class to decorate. Omit to use the decorator with arguments.
        provided_in: ``"root"`` to have ``Wiring.provide_root`` register the
            class in the root scope.
        dependencies: Ordered dependency names (or classes). Defaults to the
            class attribute ``__dependencies__``.

    Examples:
        .. code-block:: python

            @injectable(provided_in="root", dependencies=["Logger"])
            class ApiClient:
                def __init__(self, logger: Logger) -> None: ...

    """

    def decorator(decorated: C) -> C:
        return _attach(
            decorated,
            EntityManifest(
                kind=EntityKind.INJECTABLE,
                dependencies=_dependency_names(decorated, dependencies),
                provided_in=provided_in,
            ),
        )

    if entity is None:
        return decorator
    return decorator(entity)


def component(
    selector: str,
    *,
    providers: Iterable[ProviderLike] = (),
    dependencies: Iterable[object] | str | None = None,
) -> Callable[[C], C]:
    """Mark a class as a leaf component owning the ``selector`` scope.

    Args:
        selector: Component scope selector.
        providers: Providers registered in the component scope on mount.
        dependencies: Ordered dependency names (or classes). Defaults to the
            class attribute ``__dependencies__``.

    """

    def decorator(decorated: C) -> C:
        return _attach(
            decorated,
            EntityManifest(
                kind=EntityKind.COMPONENT,
                dependencies=_dependency_names(decorated, dependencies),
                selector=selector,
                providers=tuple(providers),
            ),
        )

    return decorator


def router(
    selector: str,
    *,
    components: Iterable[object] = (),
    providers: Iterable[ProviderLike] = (),
    dependencies: Iterable[object] | str | None = None,
) -> Callable[[C], C]:
    """Mark a class as a router owning the ``selector`` scope.

    Args:
        selector: Router scope selector.
        components: Member components or nested routers, as classes or names.
        providers: Providers registered in the router scope and shared by
            every member.
        dependencies: Ordered dependency names (or classes). Defaults to the
            class attribute ``__dependencies__``.

    """

    def decorator(decorated: C) -> C:
        return _attach(
            decorated,
            EntityManifest(
                kind=EntityKind.ROUTER,
                dependencies=_dependency_names(decorated, dependencies),
                selector=selector,
                providers=tuple(providers),
                components=tuple(components),
            ),
        )

    return decorator


class Wiring:
    """Construct decorated entities by resolving their manifests on an engine.

    This layer only translates manifests into ``setup_*`` and ``resolve``
    calls; every lookup decision is made by the engine.
    """

    def __init__(self, engine: DependencyEngine) -> None:
        self._engine = engine

    @property
    def engine(self) -> DependencyEngine:
        return self._engine

    def provide_root(self, *entities: type[Any]) -> None:
        """Register every class marked ``provided_in="root"`` in the root scope.

        Classes without that marker are skipped.
        """
        for entity in entities:
            manifest = manifest_of(entity)
            if manifest is None or manifest.provided_in != "root":
                logger.debug("Skipping '%s': not provided in root", provider_name(entity))
                continue
            self._engine.setup_root(self._bind(entity, None, None, None))

    def mount(self, entity: type[T]) -> T:
        """Set up the scope of a component or router and construct it.

        Args:
            entity: Class decorated with ``@component`` or ``@router``.

        Returns:
            A new instance built from the resolved manifest dependencies.
            Dependencies no scope provides are passed as ``None``.

        Raises:
            ScopeWireInvalidEntityError: If ``entity`` is not a component or
                router.

        """
        manifest = manifest_of(entity)
        if manifest is None or manifest.kind is EntityKind.INJECTABLE:
            msg = (
                f"'{provider_name(entity)}' is not a component or router; "
                "decorate it with @component(...) or @router(...)."
            )
            raise ScopeWireInvalidEntityError(msg)

        name = provider_name(entity)
        selector = manifest.selector
        if manifest.kind is EntityKind.COMPONENT:
            router_selector = self._engine.router_of(name)
            self._engine.setup_component(
                selector,
                [
                    self._bind(provider, selector, router_selector, name)
                    for provider in (*manifest.providers, entity)
                ],
            )
            return self.construct(entity, selector, router_selector, name)

        self._engine.setup_router(
            manifest.components,
            [self._bind(provider, None, selector, name) for provider in (*manifest.providers, entity)],
            selector,
        )
        return self.construct(entity, None, selector, name)

    def construct(
        self,
        entity: Callable[..., T],
        component_selector: str | None = None,
        router_selector: str | None = None,
        owner_name: str | None = None,
    ) -> T:
        """Call ``entity`` with one resolved argument per manifest entry, in order."""
        manifest = manifest_of(entity)
        dependencies = (
            manifest.dependencies
            if manifest is not None
            else _dependency_names(entity, None)
        )
        arguments = [
            self._engine.resolve(dependency, component_selector, router_selector, owner_name)
            for dependency in dependencies
        ]
        return entity(*arguments)

    def _bind(
        self,
        provider: ProviderLike,
        component_selector: str | None,
        router_selector: str | None,
        owner_name: str | None,
    ) -> ProviderLike:
        if isinstance(provider, Provider):
            return provider
        manifest = manifest_of(provider)
        dependencies = (
            manifest.dependencies if manifest is not None else _dependency_names(provider, None)
        )
        if not dependencies:
            return provider

        def factory() -> Any:
            return self.construct(provider, component_selector, router_selector, owner_name)

        return Provider(name=provider_name(provider), factory=factory)


__all__ = [
    "EntityKind",
    "EntityManifest",
    "Wiring",
    "component",
    "injectable",
    "manifest_of",
    "router",
]
