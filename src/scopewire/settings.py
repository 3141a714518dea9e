from scopewire._internal.settings import DEFAULT_ENGINE_NAME, EngineSettings

__all__ = ["DEFAULT_ENGINE_NAME", "EngineSettings"]
