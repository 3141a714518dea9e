from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for registration, resolution and reset.

    The engine uses a single lock for every operation that reads and then
    writes the instance store. Pick ``NONE`` only when the engine is confined
    to one thread.
    """

    THREAD = "thread"
    """Guard the engine with one ``threading.RLock``."""

    NONE = "none"
    """Disable locking around store reads/writes."""
