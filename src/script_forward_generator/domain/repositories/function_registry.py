#!/usr/bin/env python3

"""Insertion-ordered registry of forwardable functions.

The registry is filled depth-first while headers are parsed: the root
class first, then each base class. The first declaration of a name wins,
so a descendant's signature always shadows its ancestors'.
"""

from collections.abc import Iterator

from ...infrastructure.logging import get_logger
from ..models.header import FunctionInfo

logger = get_logger(__name__)


class FunctionRegistry:
    """Accumulates FunctionInfo objects keyed by function name."""

    def __init__(self) -> None:
        self._functions: dict[str, FunctionInfo] = {}

    def insert_if_absent(self, info: FunctionInfo) -> bool:
        """Register a function unless its name is already taken.

        Args:
            info: Function discovered in a header

        Returns:
            True if the function was added, False if it was shadowed
        """
        existing = self._functions.get(info.function_name)
        if existing is not None:
            logger.debug(
                f"Skipping {info.function_name} from {info.source_file}: "
                f"already declared in {existing.source_file}"
            )
            return False

        self._functions[info.function_name] = info
        return True

    def get(self, function_name: str) -> FunctionInfo | None:
        return self._functions.get(function_name)

    def names(self) -> list[str]:
        return list(self._functions)

    def __iter__(self) -> Iterator[FunctionInfo]:
        return iter(self._functions.values())

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, function_name: object) -> bool:
        return function_name in self._functions
