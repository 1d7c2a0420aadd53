"""
One character of lookahead over a forward-only text stream.
"""

from typing import Optional, TextIO

from .errors import EndOfInput
from .tokens import SourceLocation


class RuneSource:
    """
    Wraps a character stream and exposes peek/consume.

    The stream only needs a ``read(size)`` method returning text, so
    ``io.StringIO`` and files opened in text mode both work.
    """

    def __init__(self, stream: TextIO, filename: str = "<unknown>"):
        self.stream = stream
        self.filename = filename
        self.line = 1
        self.column = 1
        self.offset = 0
        self._pending: Optional[str] = None

    @property
    def location(self) -> SourceLocation:
        """Location of the next unconsumed character."""
        return SourceLocation(self.filename, self.line, self.column, self.offset)

    def peek(self) -> str:
        """
        Return the next character without consuming it.

        Raises:
            EndOfInput: If the stream is exhausted
        """
        if self._pending is None:
            self._pending = self._read()

        return self._pending

    def consume(self) -> str:
        """
        Return the next character and move past it.

        Raises:
            EndOfInput: If the stream is exhausted
        """
        if self._pending is not None:
            char, self._pending = self._pending, None
        else:
            char = self._read()

        self._advance_position(char)
        return char

    def _read(self) -> str:
        # Read errors other than exhaustion propagate unchanged
        char = self.stream.read(1)
        if not char:
            raise EndOfInput()
        return char

    def _advance_position(self, char: str):
        self.offset += 1
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
