from scopewire._internal.engine import DependencyEngine
from scopewire._internal.lifecycle import ResetPolicy
from scopewire._internal.lock_mode import LockMode
from scopewire._internal.providers import Lifetime, Provider
from scopewire._internal.settings import EngineSettings
from scopewire._internal.tokens import ScopeKind, Token, make_token, scope_key
from scopewire._internal.wiring import Wiring, component, injectable, router
from scopewire.exceptions import (
    ScopeWireError,
    ScopeWireInvalidEntityError,
    ScopeWireInvalidProviderError,
    ScopeWireInvalidScopeError,
    ScopeWireScopeNotFoundError,
)

__all__ = [
    "DependencyEngine",
    "EngineSettings",
    "Lifetime",
    "LockMode",
    "Provider",
    "ResetPolicy",
    "ScopeKind",
    "ScopeWireError",
    "ScopeWireInvalidEntityError",
    "ScopeWireInvalidProviderError",
    "ScopeWireInvalidScopeError",
    "ScopeWireScopeNotFoundError",
    "Token",
    "Wiring",
    "component",
    "injectable",
    "make_token",
    "router",
    "scope_key",
]
