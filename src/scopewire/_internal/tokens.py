from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from scopewire.exceptions import ScopeWireInvalidScopeError

ROOT_SCOPE_KEY = "root"


class ScopeKind(Enum):
    """Name the three tiers of the scope hierarchy.

    Values double as the prefix of the scope key, so ``ScopeKind.ROUTER`` with
    selector ``"checkout"`` is keyed as ``"router:checkout"``.
    """

    ROOT = "root"
    """Process-wide scope; has no selector."""

    ROUTER = "router"
    """Feature-level scope shared by the router's member components."""

    COMPONENT = "component"
    """Leaf scope owned by a single component selector."""


@dataclass(frozen=True, slots=True)
class Token:
    """Identify one provider name inside one scope.

    Tokens compare by value: deriving a token twice from the same inputs
    gives equal, interchangeable tokens.
    """

    scope_key: str
    name: str

    def __str__(self) -> str:
        return f"{self.scope_key}:{self.name}"


def scope_key(kind: ScopeKind | str, selector: str | None = None) -> str:
    """Build the key of a scope table.

    Args:
        kind: Scope kind, either a ``ScopeKind`` or its string value.
        selector: Router or component selector. Ignored for the root scope.

    Returns:
        ``"root"`` for the root scope, ``"<kind>:<selector>"`` otherwise.

    Raises:
        ScopeWireInvalidScopeError: If ``kind`` is unknown, or a router or
            component key is requested without a selector.

    """
    scope_kind = coerce_scope_kind(kind)
    if scope_kind is ScopeKind.ROOT:
        return ROOT_SCOPE_KEY
    if not selector:
        msg = f"Scope kind '{scope_kind.value}' requires a selector."
        raise ScopeWireInvalidScopeError(msg)
    return f"{scope_kind.value}:{selector}"


def make_token(name: str, key: str) -> Token:
    """Derive the token binding ``name`` to the scope identified by ``key``."""
    return Token(scope_key=key, name=name)


def coerce_scope_kind(kind: ScopeKind | str) -> ScopeKind:
    if isinstance(kind, ScopeKind):
        return kind
    try:
        return ScopeKind(kind)
    except ValueError:
        msg = f"Unknown scope kind {kind!r}; expected one of {[k.value for k in ScopeKind]}."
        raise ScopeWireInvalidScopeError(msg) from None


__all__ = [
    "ROOT_SCOPE_KEY",
    "ScopeKind",
    "Token",
    "coerce_scope_kind",
    "make_token",
    "scope_key",
]
