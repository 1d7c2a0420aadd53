"""
Token definitions for the Monkey lexer.

This module defines every token type the Monkey language knows about:
- Special tokens (illegal characters, end of input)
- Identifiers and integer literals
- Operators and punctuation
- Keywords

Each token type's value is its canonical display string, used in error
messages and tests.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    The value of each member is its display string: the literal symbol for
    operators and punctuation, an uppercase tag for everything else.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = "ILLEGAL"             # Unrecognized character
    EOF = "EOF"                     # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = "IDENT"                 # add, foobar, x, y
    INT = "INT"                     # 1343456

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = "ASSIGN"               # =
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = ","
    SEMICOLON = ";"

    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = "FUNCTION"           # fn
    LET = "LET"                     # let
    TRUE = "TRUE"                   # true
    FALSE = "FALSE"                 # false
    IF = "IF"                       # if
    ELSE = "ELSE"                   # else
    RETURN = "RETURN"               # return

    def __str__(self) -> str:
        return self.value

    @classmethod
    def describe(cls, token_type: Any) -> str:
        """Display string for a token type, "ILLEGAL" for anything unknown."""
        if isinstance(token_type, cls):
            return token_type.value
        return cls.ILLEGAL.value


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting only.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    Tokens compare by type and literal only; the location is there for
    diagnostics and plays no part in equality.
    """
    type: TokenType
    literal: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, {self.location!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORDS.values()

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation."""
        return self.type in OPERATORS.values()


# Lookup tables used by the lexer for keyword and symbol recognition

KEYWORDS = {
    "let": TokenType.LET,
    "fn": TokenType.FUNCTION,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

OPERATORS = {
    # Arithmetic
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,

    # Assignment and logical not
    "=": TokenType.ASSIGN,
    "!": TokenType.BANG,

    # Comparison
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,

    # Punctuation
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

# Symbols that are a complete token on their own and never start a longer one
SINGLE_CHAR_TOKENS = {
    symbol: token_type
    for symbol, token_type in OPERATORS.items()
    if len(symbol) == 1 and symbol not in ("=", "!")
}


def lookup_identifier(word: str) -> TokenType:
    """Return the keyword type for word, or IDENT if it is not reserved."""
    return KEYWORDS.get(word, TokenType.IDENT)
