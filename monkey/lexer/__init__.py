"""
Monkey Lexer Package

Implements the lexical analyzer (tokenizer) for the Monkey language.

Key Features:
- Pull based: one token per call, no buffering of the whole input
- One character of lookahead over any text stream
- Maximal munch for identifiers, keywords, integers and two character operators
- Unrecognized characters become ILLEGAL tokens instead of failing
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, lookup_identifier
from .source import RuneSource
from .lexer import Lexer, tokenize_string
from .errors import Diagnostic, EndOfInput, LexerError

__all__ = [
    "Lexer",
    "RuneSource",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "lookup_identifier",
    "tokenize_string",
    "Diagnostic",
    "EndOfInput",
    "LexerError",
]
