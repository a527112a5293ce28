#!/usr/bin/env python3

"""Grammar matcher turning header lines into typed statements.

Recognized forms:

- ``class Name;``                                   -> ForwardDecl
- ``class Name [: public Base1, public Base2] [{]`` -> ClassDef
- ``virtual ...;`` / ``virtual ... {}``             -> MethodDecl
- everything else, destructors included             -> Skip
"""

import re
from pathlib import Path

from ....exceptions import HeaderSyntaxError
from ...models.header import ClassDef, ForwardDecl, MethodDecl, Skip

IDENTIFIER = re.compile(r"[A-Za-z_]\w*")

_CLASS_KEYWORD = re.compile(r"class\b")
_FORWARD_DECL = re.compile(r"class\s+(?P<name>[A-Za-z_]\w*)\s*;")
_CLASS_DEF = re.compile(
    r"class\s+(?P<name>[A-Za-z_]\w*)(?:\s+final)?\s*"
    r"(?::(?P<bases>[^{]*))?"
    r"(?P<body>\{.*)?"
)

UNSUPPORTED_SPECIFIERS = ("private", "protected", "virtual")


class StatementClassifier:
    """Classifies class lines and reconstructed statements."""

    def __init__(self, marker_base: str = "ScriptAccess"):
        """
        Args:
            marker_base: Bridging-capability base class that is dropped
                from base-class lists instead of being parsed
        """
        self.marker_base = marker_base

    @staticmethod
    def is_class_line(line: str) -> bool:
        return _CLASS_KEYWORD.match(line) is not None

    def classify_class_line(
        self,
        line: str,
        path: Path | None = None,
        line_number: int | None = None,
    ) -> ClassDef | ForwardDecl:
        """Classify a line starting with the ``class`` keyword.

        Raises:
            HeaderSyntaxError: If the line is neither a plain forward
                declaration nor a supported class definition
        """
        if ";" in line and "{" not in line:
            match = _FORWARD_DECL.fullmatch(line)
            if match is None:
                raise HeaderSyntaxError(
                    f"unsupported forward declaration '{line}'", path, line_number
                )
            return ForwardDecl(match.group("name"))

        match = _CLASS_DEF.fullmatch(line)
        if match is None:
            raise HeaderSyntaxError(f"unsupported class declaration '{line}'", path, line_number)

        body = (match.group("body") or "{")[1:].strip()
        bases = match.group("bases")
        if bases is None:
            return ClassDef(match.group("name"), body=body)

        return ClassDef(
            match.group("name"), self._parse_base_list(bases, path, line_number), body=body
        )

    def _parse_base_list(
        self, bases: str, path: Path | None, line_number: int | None
    ) -> tuple[str, ...]:
        if not bases.strip():
            raise HeaderSyntaxError(
                "base-class list must be on the same line as the class name", path, line_number
            )

        names: list[str] = []
        for entry in bases.split(","):
            words = [word for word in entry.split() if word != "public"]
            if not words:
                raise HeaderSyntaxError(f"empty entry in base-class list '{bases.strip()}'", path, line_number)

            unsupported = [word for word in words if word in UNSUPPORTED_SPECIFIERS]
            if unsupported:
                raise HeaderSyntaxError(
                    f"'{unsupported[0]}' inheritance is not supported", path, line_number
                )
            if len(words) != 1 or IDENTIFIER.fullmatch(words[0]) is None:
                raise HeaderSyntaxError(
                    f"unsupported base class '{entry.strip()}'", path, line_number
                )

            name = words[0]
            if name != self.marker_base and name not in names:
                names.append(name)

        return tuple(names)

    @staticmethod
    def classify_statement(statement: str) -> MethodDecl | Skip:
        """Decide whether a complete statement is a forwardable method."""
        words = statement.split(None, 1)
        if not words or words[0] != "virtual":
            return Skip("not a virtual method")
        if "~" in statement:
            return Skip("destructor")
        return MethodDecl(statement)
