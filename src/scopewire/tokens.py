from scopewire._internal.tokens import ScopeKind, Token, make_token, scope_key

__all__ = ["ScopeKind", "Token", "make_token", "scope_key"]
