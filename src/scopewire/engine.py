from scopewire._internal.engine import DependencyEngine
from scopewire._internal.lifecycle import ResetPolicy

__all__ = ["DependencyEngine", "ResetPolicy"]
