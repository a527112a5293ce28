"""Path utilities for header inputs and generated outputs."""

import re
from pathlib import Path

_CLASS_NAME = re.compile(r"[A-Za-z_]\w*")


def class_name_from_header(header_path: Path) -> str:
    """Derive the class name from a header file name (``Foo.h`` -> ``Foo``).

    Raises:
        ValueError: If the file name is not a valid C++ identifier
    """
    name = header_path.stem
    if not _CLASS_NAME.fullmatch(name):
        raise ValueError(f"Header name '{header_path.name}' is not a valid C++ class name")
    return name


def create_header_filename(class_name: str, suffix: str = "", extension: str = ".h") -> str:
    """Create the file name of a generated source, e.g. ``FooScriptForward.h``."""
    return f"{class_name}{suffix}{extension}"


def include_guard(class_name: str) -> str:
    """Include guard macro for a generated header."""
    return f"{class_name}_h_"
