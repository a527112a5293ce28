#!/usr/bin/env python3

"""Signature extraction for single-argument virtual methods.

Only one shape is supported::

    virtual <ReturnType> <name>(<ArgumentType> <argumentName>) [override] ;
    virtual <ReturnType> <name>(<ArgumentType> <argumentName>) [override] {}

The return type is a single token. Statements outside this grammar raise
SignatureError instead of producing a half-parsed FunctionInfo.
"""

import re
from collections.abc import Callable
from pathlib import Path

from ....exceptions import SignatureError
from ...models.header import FunctionInfo
from .statement_classifier import IDENTIFIER

_SIGNATURE = re.compile(
    r"(?P<return_type>\S+)\s+(?P<name>[A-Za-z_]\w*)\s*"
    r"\((?P<argument>[^()]*)\)\s*(?P<trailer>.*)"
)
_ARGUMENT = re.compile(r"(?P<type>.*?\S)\s*\b(?P<name>[A-Za-z_]\w*)")
_EMPTY_BODY = re.compile(r"\{\s*\}$")

# Built-in type words that can end an unnamed parameter
_TYPE_KEYWORDS = frozenset(
    {"bool", "char", "const", "double", "float", "int", "long", "short", "signed", "unsigned", "void"}
)


class SignatureExtractor:
    """Builds FunctionInfo objects from ``virtual`` method statements."""

    @staticmethod
    def is_eligible(statement: str) -> bool:
        """True for ``virtual`` statements that are not destructors."""
        words = statement.split(None, 1)
        return bool(words) and words[0] == "virtual" and "~" not in statement

    def extract(
        self,
        statement: str,
        path: Path | None = None,
        line_number: int | None = None,
    ) -> FunctionInfo:
        """Decompose a virtual method declaration.

        Args:
            statement: Complete statement ending in ``;`` or ``}``
            path: Header the statement came from, for error reporting
            line_number: Line the statement started on

        Returns:
            FunctionInfo for the method

        Raises:
            SignatureError: If the statement is not an eligible method
                or does not fit the supported grammar
        """

        def fail(reason: str) -> SignatureError:
            return SignatureError(reason, path, line_number)

        if not self.is_eligible(statement):
            raise fail(f"not a forwardable virtual method: '{statement}'")

        signature = statement.strip().split(None, 1)[1].strip()
        match = _SIGNATURE.fullmatch(signature)
        if match is None:
            raise fail(self._diagnose(signature))

        trailer = self._strip_trailer(match.group("trailer"))
        if trailer:
            if trailer.startswith("{"):
                raise fail(f"inline body of '{match.group('name')}' must be empty")
            if re.fullmatch(r"=\s*0", trailer):
                raise fail(f"pure virtual method '{match.group('name')}' cannot be forwarded")
            raise fail(f"unsupported qualifier '{trailer}' after '{match.group('name')}(...)'")

        argument_type, argument_name = self._split_argument(match.group("argument"), fail)

        return FunctionInfo(
            function_name=match.group("name"),
            return_type=match.group("return_type"),
            argument_type=argument_type,
            argument_name=argument_name,
            source_file=path,
            line_number=line_number,
        )

    @staticmethod
    def _strip_trailer(trailer: str) -> str:
        """Remove the terminator, an empty inline body and ``override``."""
        trailer = trailer.strip()
        if trailer.endswith(";"):
            trailer = trailer[:-1].rstrip()
        trailer = _EMPTY_BODY.sub("", trailer).rstrip()

        words = trailer.split()
        if words[:1] == ["override"]:
            trailer = trailer[len("override"):].strip()
        return trailer

    @staticmethod
    def _split_argument(
        argument: str, fail: Callable[[str], SignatureError]
    ) -> tuple[str, str]:
        argument = argument.strip()

        if not argument or argument == "void":
            raise fail("expected exactly one argument, found none")
        if "<" in argument:
            raise fail(f"template argument type '{argument}' is not supported")
        if "," in argument:
            raise fail(f"expected exactly one argument, found '{argument}'")
        if "=" in argument:
            raise fail(f"default argument in '{argument}' is not supported")

        match = _ARGUMENT.fullmatch(argument)
        if match is None or match.group("name") in _TYPE_KEYWORDS:
            raise fail(f"argument '{argument}' needs both a type and a name")

        return match.group("type").strip(), match.group("name")

    @staticmethod
    def _diagnose(signature: str) -> str:
        """Explain why a signature did not match the grammar."""
        if "(" not in signature or ")" not in signature:
            return f"missing argument list in '{signature}'"

        head = signature.split("(", 1)[0].split()
        if len(head) < 2:
            return f"missing return type in '{signature}'"
        if len(head) > 2:
            return f"return type must be a single token in '{signature}'"
        if IDENTIFIER.fullmatch(head[1]) is None:
            return f"unsupported function name '{head[1]}' in '{signature}'"
        return f"unsupported method declaration '{signature}'"
