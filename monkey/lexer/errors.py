"""
Error handling for the Monkey lexer.

Unrecognized characters are not errors here: they become ILLEGAL tokens and
are reported by the parser. The only fatal lexer condition is a failure to
read from the underlying character stream.
"""

from typing import Optional
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for front end diagnostics (errors, warnings)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"

        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class EndOfInput(EOFError):
    """Raised by a rune source once its stream is exhausted."""


class LexerError(Exception):
    """
    Exception raised when the lexer cannot read its input.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Input stream read failure",
}


def create_read_error(cause: Exception, location: Optional[SourceLocation]) -> LexerError:
    """Create an error for a failed read from the character stream."""
    return LexerError(
        message=f"Failed to read source: {cause}",
        location=location,
        code="L001",
        help_text="The input stream raised an error before reaching its end."
    )
