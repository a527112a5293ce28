#!/usr/bin/env python3

"""Application layer orchestrating parsing and generation."""

from . import generators

__all__ = ["generators"]
