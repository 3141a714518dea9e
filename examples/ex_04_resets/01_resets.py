"""Reset policies.

``ResetPolicy.GLOBAL`` flushes every cached instance on ``reset_scope`` and
``reset_class``. ``ResetPolicy.SELECTIVE`` only touches the named target.
Providers stay registered either way.
"""

from __future__ import annotations

from scopewire import DependencyEngine, ResetPolicy, ScopeKind


class Session:
    pass


def _root_kept_after_cart_reset(policy: ResetPolicy) -> bool:
    engine = DependencyEngine(reset_policy=policy)
    engine.setup_root(Session)
    engine.setup_component("cart", [Session])
    before = engine.resolve("Session")
    engine.resolve("Session", "cart")

    engine.reset_scope(ScopeKind.COMPONENT, "cart")

    return engine.resolve("Session") is before


def main() -> None:
    global_kept = _root_kept_after_cart_reset(ResetPolicy.GLOBAL)
    selective_kept = _root_kept_after_cart_reset(ResetPolicy.SELECTIVE)

    print(f"global_root_kept={global_kept}")  # => global_root_kept=False
    print(f"selective_root_kept={selective_kept}")  # => selective_root_kept=True

    engine = DependencyEngine()
    engine.setup_root(Session)
    before = engine.resolve("Session")
    engine.reset_all()

    print(f"rebuilt={engine.resolve('Session') is not before}")  # => rebuilt=True
    print(f"still_registered={engine.is_registered(Session)}")  # => still_registered=True


if __name__ == "__main__":
    main()
