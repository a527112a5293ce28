#!/usr/bin/env python3

"""Generation services for ScriptForward sources."""

from .forward_class_generator import ForwardClassGenerator, GeneratedSources

__all__ = [
    "ForwardClassGenerator",
    "GeneratedSources",
]
