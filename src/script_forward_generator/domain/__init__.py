#!/usr/bin/env python3

"""Domain layer containing parsing, generation and models."""

from . import models, repositories, services

__all__ = [
    "models",
    "repositories",
    "services",
]
