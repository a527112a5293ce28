"""Utilities module initialization."""

from .path_utils import class_name_from_header, create_header_filename, include_guard

__all__ = [
    "class_name_from_header",
    "create_header_filename",
    "include_guard",
]
