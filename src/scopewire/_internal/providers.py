from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, TypeAlias

from scopewire.exceptions import ScopeWireInvalidProviderError

Factory: TypeAlias = Callable[[], Any]
"""A zero-argument callable producing a dependency instance."""

ProviderLike: TypeAlias = "Provider | Callable[..., Any]"
"""A ``Provider`` or a class/function whose ``__name__`` names the provider."""


class Lifetime(Enum):
    """Define cache behavior for provider results."""

    SINGLETON = auto()
    """Build once per token and return the cached value until invalidated."""


@dataclass(frozen=True, slots=True)
class Provider:
    """Pair a provider name with the factory that builds its instance.

    Use it when the factory is not a class, or when the registered name must
    differ from the factory's ``__name__``.
    """

    name: str
    factory: Factory

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            msg = f"Provider name must be a non-empty string, got {self.name!r}."
            raise ScopeWireInvalidProviderError(msg)
        if not callable(self.factory):
            msg = f"Provider '{self.name}' factory must be callable, got {self.factory!r}."
            raise ScopeWireInvalidProviderError(msg)


def provider_name(value: object) -> str:
    """Return the name a provider, entity or reference is registered under.

    Strings are taken as-is; ``Provider`` values contribute their ``name``;
    anything else must expose a non-empty ``__name__``.

    Args:
        value: String, ``Provider``, class or function.

    Raises:
        ScopeWireInvalidProviderError: If no name can be derived.

    """
    if isinstance(value, str):
        return value
    if isinstance(value, Provider):
        return value.name
    name = getattr(value, "__name__", None)
    if not isinstance(name, str) or not name:
        msg = f"Cannot derive a provider name from {value!r}; pass Provider(name, factory)."
        raise ScopeWireInvalidProviderError(msg)
    return name


def as_provider(value: ProviderLike) -> Provider:
    """Normalize a class, function or ``Provider`` into a ``Provider``."""
    if isinstance(value, Provider):
        return value
    if not callable(value):
        msg = f"Provider {value!r} is not callable."
        raise ScopeWireInvalidProviderError(msg)
    return Provider(name=provider_name(value), factory=value)


__all__ = [
    "Factory",
    "Lifetime",
    "Provider",
    "ProviderLike",
    "as_provider",
    "provider_name",
]
