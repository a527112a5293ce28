#!/usr/bin/env python3

"""Function information model for virtual method forwarding."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FunctionInfo:
    """A single-argument virtual method that the forward class overrides."""

    function_name: str
    return_type: str
    argument_type: str
    argument_name: str
    # Where the declaration was found; not part of the method's identity
    source_file: Path | None = field(default=None, compare=False)
    line_number: int | None = field(default=None, compare=False)

    @property
    def parameter(self) -> str:
        """Argument as written in a parameter list, e.g. ``const Foo& foo``."""
        return f"{self.argument_type} {self.argument_name}"
