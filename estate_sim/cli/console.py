"""Line-buffered console input with explicit parse results.

Reads behave like whitespace-delimited stream extraction: a token may be
followed by more tokens on the same line, and the unread remainder of a
line stays pending until consumed or discarded.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Generic, TextIO, TypeVar

T = TypeVar("T")

# Plain ASCII literals only, no exponents, digit separators or other scripts
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class InputErrorKind(str, Enum):
    NOT_A_NUMBER = "NOT_A_NUMBER"
    END_OF_INPUT = "END_OF_INPUT"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a parsed value or the kind of input fault."""

    value: T | None = None
    error: InputErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ConsoleReader:
    """Token and line reader over a text stream (stdin by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._pending = ""

    def _fill(self) -> bool:
        """Append the next input line to the pending buffer."""
        line = self._stream.readline()
        if not line:
            return False
        self._pending += line
        return True

    def read_token(self) -> ParseResult[str]:
        """Skip whitespace, including line breaks, and read one token."""
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                break
            self._pending = ""
            if not self._fill():
                return ParseResult(error=InputErrorKind.END_OF_INPUT)

        end = 0
        while end < len(stripped) and not stripped[end].isspace():
            end += 1
        self._pending = stripped[end:]
        return ParseResult(value=stripped[:end])

    def read_int(self) -> ParseResult[int]:
        token = self.read_token()
        if not token.ok:
            return ParseResult(error=token.error)
        if not INT_PATTERN.fullmatch(token.value):
            return ParseResult(error=InputErrorKind.NOT_A_NUMBER)
        return ParseResult(value=int(token.value))

    def read_decimal(self) -> ParseResult[Decimal]:
        token = self.read_token()
        if not token.ok:
            return ParseResult(error=token.error)
        if not DECIMAL_PATTERN.fullmatch(token.value):
            return ParseResult(error=InputErrorKind.NOT_A_NUMBER)
        return ParseResult(value=Decimal(token.value))

    def skip_char(self) -> None:
        """Drop a single pending character, usually the line break after a token.

        A CRLF pair counts as one line break.
        """
        if not self._pending:
            self._fill()
        skip = 2 if self._pending.startswith("\r\n") else 1
        self._pending = self._pending[skip:]

    def read_line(self) -> ParseResult[str]:
        """Read the rest of the current line, or the next line if none is pending."""
        if not self._pending and not self._fill():
            return ParseResult(error=InputErrorKind.END_OF_INPUT)
        line, _, rest = self._pending.partition("\n")
        self._pending = rest
        return ParseResult(value=line.rstrip("\r"))

    def discard_line(self) -> None:
        """Drop pending input up to and including the next line break."""
        _, _, rest = self._pending.partition("\n")
        self._pending = rest
