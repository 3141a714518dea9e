from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from scopewire._internal.lifecycle import ResetPolicy
from scopewire._internal.lock_mode import LockMode

DEFAULT_ENGINE_NAME = "DependencyEngine"


class EngineSettings(BaseSettings):
    """Configure a ``DependencyEngine`` from keyword arguments or the environment.

    Every field can be set through a ``SCOPEWIRE_``-prefixed environment
    variable, for example ``SCOPEWIRE_RESET_POLICY=selective``.

    Examples:
        .. code-block:: python

            engine = DependencyEngine(EngineSettings(lock_mode=LockMode.NONE))

    """

    model_config = SettingsConfigDict(
        env_prefix="SCOPEWIRE_",
        case_sensitive=False,
        extra="ignore",
    )

    lock_mode: LockMode = LockMode.THREAD
    """Locking used around registration, resolution and reset."""

    reset_policy: ResetPolicy = ResetPolicy.GLOBAL
    """How ``reset_scope``/``reset_class`` invalidate cached instances."""

    engine_name: str = Field(default=DEFAULT_ENGINE_NAME, min_length=1)
    """Reserved provider name that resolves to the engine itself."""


__all__ = ["DEFAULT_ENGINE_NAME", "EngineSettings"]
