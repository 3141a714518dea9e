class ScopeWireError(Exception):
    """Represent a base class for all scopewire-specific failures.

    Catch this type when you want to handle any scopewire error path without
    matching each concrete exception class individually.

    A missing provider is never reported through this hierarchy: ``resolve``
    and ``get`` return ``None`` and leave the consequence to the caller.
    """


class ScopeWireScopeNotFoundError(ScopeWireError):
    """Signal that a scope table expected from a previous setup call is missing.

    Raised by ``ScopeRegistry.require_table``, which the component and router
    setup paths use to fetch the table they have just declared. This is an
    internal invariant violation, not a configuration problem a caller can
    recover from.

    Typical fix is calling ``setup_component``/``setup_router`` for the
    selector before operating on it.
    """


class ScopeWireInvalidScopeError(ScopeWireError):
    """Signal an invalid scope kind or selector combination.

    Raised when a router or component scope key is built without a selector,
    or when an unknown scope kind is passed to a reset or lookup API.
    """


class ScopeWireInvalidProviderError(ScopeWireError):
    """Signal a provider that cannot be registered.

    Raised when a provider has no usable name (no ``__name__`` and no explicit
    name) or when its factory is not callable.
    """


class ScopeWireInvalidEntityError(ScopeWireError):
    """Signal an entity that cannot be wired.

    Raised by ``Wiring.mount`` when the class was not decorated with
    ``@component`` or ``@router``.
    """
