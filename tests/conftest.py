"""Shared pytest fixtures for scopewire tests."""

import pytest

from scopewire import DependencyEngine, LockMode, ResetPolicy, Wiring


@pytest.fixture()
def engine() -> DependencyEngine:
    """Default engine: thread lock, global reset policy."""
    return DependencyEngine(lock_mode=LockMode.THREAD, reset_policy=ResetPolicy.GLOBAL)


@pytest.fixture()
def selective_engine() -> DependencyEngine:
    """Engine whose scope/class resets only touch the named target."""
    return DependencyEngine(lock_mode=LockMode.THREAD, reset_policy=ResetPolicy.SELECTIVE)


@pytest.fixture()
def wiring(engine: DependencyEngine) -> Wiring:
    return Wiring(engine)
