#!/usr/bin/env python3

"""Class header model for a parsed header file."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ClassHeader:
    """What one header file contributes besides its methods."""

    class_name: str
    path: Path
    base_classes: list[str] = field(default_factory=list)
    forward_declarations: list[str] = field(default_factory=list)

    def base_header_path(self, base_class: str, extension: str = ".h") -> Path:
        """Resolve a base class to the header next to this one."""
        return self.path.parent / f"{base_class}{extension}"
