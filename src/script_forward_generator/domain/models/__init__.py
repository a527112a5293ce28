#!/usr/bin/env python3

"""Domain models for the ScriptForward generator."""

from . import header

__all__ = [
    "header",
]
