"""Wiring decorated classes.

Each class declares an ordered dependency manifest. ``Wiring.mount`` sets up
the entity's scope and calls ``resolve`` once per manifest entry.
"""

from __future__ import annotations

from scopewire import DependencyEngine, Wiring, component, injectable, router


@injectable(provided_in="root")
class Logger:
    pass


class NavStore:
    pass


@component("cart", dependencies=["NavStore", "Logger"])
class CartView:
    def __init__(self, nav: NavStore | None, logger: Logger) -> None:
        self.nav = nav
        self.logger = logger


@router("shop", components=[CartView], providers=[NavStore], dependencies=["NavStore"])
class ShopRouter:
    def __init__(self, nav: NavStore) -> None:
        self.nav = nav


def main() -> None:
    engine = DependencyEngine()
    wiring = Wiring(engine)
    wiring.provide_root(Logger)

    shop = wiring.mount(ShopRouter)
    cart = wiring.mount(CartView)

    print(f"shared_nav={cart.nav is shop.nav}")  # => shared_nav=True
    print(f"root_logger={cart.logger is engine.resolve(Logger)}")  # => root_logger=True


if __name__ == "__main__":
    main()
