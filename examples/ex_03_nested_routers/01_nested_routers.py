"""Nested routers: a router listed as a member of another router.

``settings`` is a member of ``app``. Resolving from ``settings`` with its own
name as owner reaches the providers of ``app`` through the parent hop.
"""

from __future__ import annotations

from scopewire import DependencyEngine


class Config:
    pass


def main() -> None:
    engine = DependencyEngine()
    engine.setup_router(["SettingsRouter"], [Config], "app")
    engine.setup_router(["ProfileView"], [], "settings")

    via_parent = engine.resolve("Config", None, "settings", "SettingsRouter")
    without_owner = engine.resolve("Config", None, "settings")

    print(f"parent_hop={via_parent is engine.resolve('Config', None, 'app')}")  # => parent_hop=True
    print(f"without_owner={without_owner}")  # => without_owner=None


if __name__ == "__main__":
    main()
