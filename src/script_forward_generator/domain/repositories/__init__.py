#!/usr/bin/env python3

"""Repositories holding state accumulated during a run."""

from .function_registry import FunctionRegistry

__all__ = ["FunctionRegistry"]
