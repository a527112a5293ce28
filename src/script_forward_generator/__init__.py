"""ScriptForward generator - script-overridable bridge classes for C++ headers."""

from .application.generators import ScriptForwardGenerator
from .infrastructure.config import Config
from .main import main

__all__ = ["Config", "ScriptForwardGenerator", "main"]
