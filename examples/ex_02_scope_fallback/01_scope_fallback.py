"""Scope fallback: component beats router beats root.

The same provider name registered in three scopes yields three independent
singletons. Which one a caller sees depends only on the selectors it passes.
"""

from __future__ import annotations

from scopewire import DependencyEngine, Provider


def main() -> None:
    engine = DependencyEngine()
    engine.setup_root(Provider("Theme", lambda: "root-theme"))
    engine.setup_router(["CartView"], [Provider("Theme", lambda: "shop-theme")], "shop")
    engine.setup_component("cart", [Provider("Theme", lambda: "cart-theme")])

    print(engine.resolve("Theme", "cart", "shop"))  # => cart-theme
    print(engine.resolve("Theme", None, "shop"))  # => shop-theme
    print(engine.resolve("Theme"))  # => root-theme
    print(f"router_of_cart_view={engine.router_of('CartView')}")  # => router_of_cart_view=shop


if __name__ == "__main__":
    main()
