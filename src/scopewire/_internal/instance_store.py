from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from scopewire._internal.providers import Factory, Lifetime
from scopewire._internal.tokens import Token

logger = logging.getLogger(__name__)
_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class Registration:
    """Bind a token to the factory that builds its instance."""

    token: Token
    factory: Factory
    lifetime: Lifetime = Lifetime.SINGLETON


class InstanceStore:
    """Hold provider registrations and at most one built instance per token.

    All scopes share one flat store; scope isolation comes from the tokens
    alone. The store performs no locking of its own, callers that share it
    across threads serialize access with the engine lock.
    """

    def __init__(self) -> None:
        self._registrations: dict[Token, Registration] = {}
        self._instances: dict[Token, Any] = {}

    def register(self, token: Token, factory: Factory) -> bool:
        """Register ``factory`` for ``token`` unless the token is already known.

        Args:
            token: Token to bind.
            factory: Zero-argument callable building the instance.

        Returns:
            ``True`` when a new registration was stored, ``False`` when the
            token was already registered and the call was a no-op.

        """
        if token in self._registrations:
            return False
        self._registrations[token] = Registration(token=token, factory=factory)
        logger.debug("Registered provider token %s", token)
        return True

    def is_registered(self, token: Token) -> bool:
        return token in self._registrations

    def has_instance(self, token: Token) -> bool:
        return token in self._instances

    def resolve(self, token: Token) -> Any | None:
        """Return the singleton for ``token``, building it on first use.

        Args:
            token: Token to resolve.

        Returns:
            The cached or freshly built instance, or ``None`` when the token
            is not registered.

        Raises:
            Exception: Whatever the factory raises. Nothing is cached in that
                case, so the next call retries the factory.

        """
        registration = self._registrations.get(token)
        if registration is None:
            return None
        if token in self._instances:
            return self._instances[token]

        instance = registration.factory()
        self._instances[token] = instance
        logger.debug("Built instance for token %s", token)
        return instance

    def clear_instance(self, token: Token) -> bool:
        """Drop the cached instance of one token, keeping its registration."""
        return self._instances.pop(token, _MISSING) is not _MISSING

    def clear_instances(self) -> int:
        """Drop every cached instance; registrations survive.

        Returns:
            Number of discarded instances.

        """
        count = len(self._instances)
        self._instances.clear()
        return count

    def drop_all(self) -> None:
        """Drop every registration and every cached instance."""
        self._registrations.clear()
        self._instances.clear()

    def __contains__(self, token: object) -> bool:
        return token in self._registrations

    def __len__(self) -> int:
        return len(self._registrations)


__all__ = ["InstanceStore", "Registration"]
