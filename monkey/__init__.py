"""
Monkey Front End Package

Lexer and parser for the Monkey programming language: turns source text
into an abstract syntax tree for a downstream evaluator.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    └── parser/          # Syntax analysis and AST generation

License: MIT
"""

__version__ = "0.1.0"
__author__ = "monkey contributors"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType
from .parser import Parser, Program, ParseError, ParseErrors, parse_string

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "Program",
    "ParseError",
    "ParseErrors",
    "parse_string",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
