"""Quickstart: register a root provider and resolve it from anywhere.

Root providers are process-wide singletons: every caller, whatever its
component scope, receives the same instance.
"""

from __future__ import annotations

from scopewire import DependencyEngine


class Logger:
    pass


def main() -> None:
    engine = DependencyEngine()
    engine.setup_root(Logger)

    from_cart = engine.resolve("Logger", "cart")
    from_search = engine.resolve("Logger", "search")
    missing = engine.resolve("Metrics")

    print(f"same_logger={from_cart is from_search}")  # => same_logger=True
    print(f"missing={missing}")  # => missing=None


if __name__ == "__main__":
    main()
