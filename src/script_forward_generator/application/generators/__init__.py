"""Application-level generators."""

from .script_forward_generator import ScriptForwardGenerator

__all__ = ["ScriptForwardGenerator"]
