"""
Monkey Parser Package

Implements a Pratt-based recursive descent parser for the Monkey language.
Produces immutable Abstract Syntax Trees, keeping the token behind every
node for diagnostics.

Key Features:
- Top-down operator precedence (Pratt parsing) for expressions
- Recursive descent for let, return and expression statements
- Error recovery: a bad statement is recorded and skipped
- Errors tagged with the token and source location they were found at
"""

from .ast_nodes import (
    ASTNode, ASTNodeType, Statement, Expression, Program,
    Identifier, IntegerLiteral, PrefixExpression, InfixExpression,
    PrefixOperator, InfixOperator,
    LetStatement, ReturnStatement, ExpressionStatement,
)
from .parser import Parser, Precedence, parse_string
from .errors import ParseError, ParseErrors

__all__ = [
    # Core parser
    "Parser",
    "Precedence",
    "parse_string",

    # AST nodes
    "ASTNode", "ASTNodeType", "Statement", "Expression", "Program",
    "Identifier", "IntegerLiteral", "PrefixExpression", "InfixExpression",
    "PrefixOperator", "InfixOperator",
    "LetStatement", "ReturnStatement", "ExpressionStatement",

    # Error handling
    "ParseError", "ParseErrors",
]
