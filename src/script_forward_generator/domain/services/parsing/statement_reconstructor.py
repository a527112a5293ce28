#!/usr/bin/env python3

"""Rebuilds complete statements from a line-oriented header.

Declarations may span several lines; this module strips comments from
each line and joins the pieces until a ``;`` or ``}`` ends the statement.
A ``virtual`` declaration whose body starts on a later line is kept open
until the body closes.
"""

import re
from dataclasses import dataclass

STATEMENT_TERMINATORS = (";", "}")

_ACCESS_LABEL = re.compile(r"\b(public|protected|private)\s*:(?!:)")
_BLOCK_PUNCTUATION = re.compile(r"[;{}]")


@dataclass(frozen=True)
class SourceStatement:
    """A reconstructed statement and the line it started on."""

    line_number: int
    text: str


class StatementReconstructor:
    """Stateful line cleaner and statement accumulator for one header file."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._start_line: int | None = None
        self._in_block_comment = False

    @property
    def in_block_comment(self) -> bool:
        return self._in_block_comment

    @property
    def pending(self) -> str:
        """Text accumulated for the statement in progress."""
        return " ".join(self._parts)

    def clean(self, raw_line: str) -> str:
        """Strip ``//`` and ``/* */`` comments and surrounding whitespace.

        Block comments may continue across calls.
        """
        kept: list[str] = []
        position = 0
        length = len(raw_line)

        while position < length:
            if self._in_block_comment:
                end = raw_line.find("*/", position)
                if end == -1:
                    break
                self._in_block_comment = False
                position = end + 2
                continue

            line_comment = raw_line.find("//", position)
            block_comment = raw_line.find("/*", position)

            if line_comment != -1 and (block_comment == -1 or line_comment < block_comment):
                kept.append(raw_line[position:line_comment])
                break
            if block_comment != -1:
                kept.append(raw_line[position:block_comment])
                self._in_block_comment = True
                position = block_comment + 2
                continue

            kept.append(raw_line[position:])
            break

        return " ".join(part.strip() for part in kept if part.strip())

    @staticmethod
    def split_inline(text: str) -> list[str]:
        """Break a one-line class body into the lines feed() expects.

        ``public: virtual void f(int x); };`` becomes
        ``["public:", "virtual void f(int x);", "}", ";"]``.
        """
        text = _ACCESS_LABEL.sub(lambda m: f"{m.group(1)}:\n", text)
        text = _BLOCK_PUNCTUATION.sub(lambda m: f"{m.group(0)}\n", text)
        return [piece.strip() for piece in text.splitlines() if piece.strip()]

    def feed(self, line_number: int, line: str) -> SourceStatement | None:
        """Add a cleaned, non-class line to the pending statement.

        A ``virtual`` declaration followed by a body on later lines stays
        open until the body's braces balance, so the body reaches the
        signature check instead of being dropped.

        Args:
            line_number: 1-based line number of ``line`` in its file
            line: Line already passed through clean()

        Returns:
            The completed statement, or None while it is still open
        """
        if not line:
            return None

        # Access labels, preprocessor lines and bare block openers
        # are never part of a declaration
        if self._open_braces() == 0 and (
            line.startswith("#")
            or line.endswith(":")
            or (line == "{" and not self._awaits_body())
        ):
            self.reset()
            return None

        if self._start_line is None:
            self._start_line = line_number
        self._parts.append(line)

        if not line.endswith(STATEMENT_TERMINATORS) or self._open_braces() > 0:
            return None

        statement = SourceStatement(self._start_line, self.pending)
        self.reset()
        return statement

    def _holds_virtual(self) -> bool:
        return bool(self._parts) and self._parts[0].split(None, 1)[0] == "virtual"

    def _awaits_body(self) -> bool:
        """True once a pending ``virtual`` declaration has a closed argument list."""
        text = self.pending
        return self._holds_virtual() and "(" in text and text.count("(") == text.count(")")

    def _open_braces(self) -> int:
        """Unbalanced ``{`` in a pending ``virtual`` statement."""
        if not self._holds_virtual():
            return 0
        text = self.pending
        return max(text.count("{") - text.count("}"), 0)

    def reset(self) -> None:
        """Drop the statement in progress."""
        self._parts.clear()
        self._start_line = None
