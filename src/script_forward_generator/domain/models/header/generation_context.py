#!/usr/bin/env python3

"""Run-scoped state shared by the recursive header parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .class_header import ClassHeader

if TYPE_CHECKING:
    from ...repositories.function_registry import FunctionRegistry


@dataclass
class GenerationContext:
    """Everything collected while generating one forward class.

    A new context is created for every root header, so several classes
    can be generated in one process without sharing state.
    """

    root_header: Path
    registry: FunctionRegistry
    forward_declarations: list[str] = field(default_factory=list)
    visited_headers: set[Path] = field(default_factory=set)
    class_headers: list[ClassHeader] = field(default_factory=list)

    @property
    def class_name(self) -> str:
        """Name of the root class, taken from the header's file name."""
        return self.root_header.stem

    def add_forward_declaration(self, class_name: str) -> bool:
        """Record a forward-declared class once, keeping first-seen order."""
        if class_name in self.forward_declarations:
            return False
        self.forward_declarations.append(class_name)
        return True

    def mark_visited(self, path: Path) -> bool:
        """Mark a header as parsed; False if it was parsed before."""
        key = path.resolve()
        if key in self.visited_headers:
            return False
        self.visited_headers.add(key)
        return True
