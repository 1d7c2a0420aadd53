"""
Error handling for the Monkey parser.

Every error is tagged with the token at which it was detected. Errors are
collected by the parser rather than stopping it, and are handed back to the
caller once parsing finishes.
"""

from typing import List, Optional, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser cannot build the current statement.

    Contains the offending token and detailed diagnostic information.
    """

    def __init__(
        self,
        message: str,
        token: Optional[Token] = None,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        if location is None and token is not None:
            location = token.location

        self.message = message
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text
        )

    @classmethod
    def wrap(cls, error: Exception, token: Optional[Token]) -> 'ParseError':
        """
        Tag error with token.

        A ParseError is already tagged and is returned as is, so wrapping
        the same error twice never nests it.
        """
        if isinstance(error, ParseError):
            return error

        diagnostic = getattr(error, "diagnostic", None)
        wrapped = cls(
            message=getattr(error, "message", str(error)),
            token=token,
            location=diagnostic.location if diagnostic is not None else None,
            code=diagnostic.code if diagnostic is not None else None,
            help_text=diagnostic.help_text if diagnostic is not None else None
        )
        wrapped.__cause__ = error
        return wrapped

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def summary(self) -> str:
        """One line description: invalid program at <token>: <message>."""
        where = self.token if self.token is not None else "start of input"
        return f"invalid program at {where}: {self.message}"

    def __str__(self) -> str:
        return f"{self.summary()}\n{self.diagnostic}"


class ParseErrors(Exception):
    """All errors recorded during one parse, joined into a single error."""

    def __init__(self, errors: List[ParseError]):
        super().__init__("\n".join(error.summary() for error in errors))
        self.errors = list(errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P005": "Invalid expression",
    "P007": "Invalid integer literal",
}


# Helper functions for creating common parser errors

def create_unexpected_token_error(expected: Union[TokenType, str], found: Token) -> ParseError:
    """Create an error for an unexpected token."""
    expected_str = TokenType.describe(expected) if isinstance(expected, TokenType) else expected
    found_str = TokenType.describe(found.type)

    return ParseError(
        message=f"expected token type {expected_str} but got {found_str}",
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected_str} at this position, but found {found_str} instead."
    )


def create_missing_prefix_rule_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    found_str = TokenType.describe(found.type)

    return ParseError(
        message=f"no prefix parse rule for token {found_str}",
        token=found,
        code="P005",
        help_text=f"An expression cannot start with {found.literal!r}."
    )


def create_invalid_integer_error(found: Token, reason: str) -> ParseError:
    """Create an error for an integer literal that cannot be converted."""
    return ParseError(
        message=f"could not parse {found.literal!r} as integer: {reason}",
        token=found,
        code="P007",
        help_text="Integer literals must fit in a signed 64-bit integer."
    )
