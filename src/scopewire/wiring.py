from scopewire._internal.wiring import (
    EntityKind,
    EntityManifest,
    Wiring,
    component,
    injectable,
    manifest_of,
    router,
)

__all__ = [
    "EntityKind",
    "EntityManifest",
    "Wiring",
    "component",
    "injectable",
    "manifest_of",
    "router",
]
