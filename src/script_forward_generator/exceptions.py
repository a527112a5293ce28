#!/usr/bin/env python3

"""Exception hierarchy for the ScriptForward generator."""

from pathlib import Path


class ScriptForwardError(Exception):
    """Base exception for all generator errors."""


class ConfigError(ScriptForwardError, ValueError):
    """Raised when the run configuration is invalid."""


class HeaderNotFoundError(ScriptForwardError, FileNotFoundError):
    """Raised when the root header or a base-class header cannot be opened."""

    def __init__(self, path: Path, required_by: Path | None = None):
        self.path = path
        self.required_by = required_by
        if required_by is None:
            message = f"Header not found: {path}"
        else:
            message = f"Base class header not found: {path} (required by {required_by.name})"
        super().__init__(message)


class HeaderSyntaxError(ScriptForwardError, ValueError):
    """Raised when a header line falls outside the supported grammar."""

    def __init__(self, message: str, path: Path | None = None, line_number: int | None = None):
        self.reason = message
        self.path = path
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path is None:
            return self.reason
        if self.line_number is None:
            return f"{self.path}: {self.reason}"
        return f"{self.path}:{self.line_number}: {self.reason}"


class SignatureError(HeaderSyntaxError):
    """Raised when a virtual method does not fit the one-argument, one-token-return grammar."""
