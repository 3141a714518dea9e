"""Pytest fixtures for code built on ``DependencyEngine``.

Enable with ``pytest_plugins = ["scopewire.integrations.pytest_plugin"]``.
Override ``scopewire_settings`` to change how the engine is configured.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from scopewire._internal.engine import DependencyEngine
from scopewire._internal.settings import EngineSettings
from scopewire._internal.wiring import Wiring


@pytest.fixture()
def scopewire_settings() -> EngineSettings:
    """Settings for the per-test engine. Override in a conftest to customize."""
    return EngineSettings()


@pytest.fixture()
def scopewire_engine(scopewire_settings: EngineSettings) -> Iterator[DependencyEngine]:
    """Yield a fresh engine and discard its cached instances after the test."""
    engine = DependencyEngine(scopewire_settings)
    try:
        yield engine
    finally:
        engine.reset_all()


@pytest.fixture()
def scopewire_wiring(scopewire_engine: DependencyEngine) -> Wiring:
    """Wiring bound to ``scopewire_engine``."""
    return Wiring(scopewire_engine)
