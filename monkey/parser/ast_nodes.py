"""
Abstract Syntax Tree node definitions for Monkey.

Nodes are frozen dataclasses forming a tree: every node owns its children,
nothing is shared and nothing is mutated once the parser has built it.
Each node keeps the token that introduced it for diagnostics only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Tuple

from ..lexer.tokens import Token


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Statements
    LET_STATEMENT = "LetStatement"
    RETURN_STATEMENT = "ReturnStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"

    # Expressions
    IDENTIFIER = "Identifier"
    INTEGER_LITERAL = "IntegerLiteral"
    PREFIX_EXPRESSION = "PrefixExpression"
    INFIX_EXPRESSION = "InfixExpression"


class PrefixOperator(Enum):
    """Unary operators."""
    NOT = "!"
    NEGATE = "-"

    def __str__(self) -> str:
        return self.value


class InfixOperator(Enum):
    """Binary operators."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    GREATER_THAN = ">"
    LESS_THAN = "<"
    EQUAL = "=="
    NOT_EQUAL = "!="

    def __str__(self) -> str:
        return self.value


class ASTNode:
    """Base class for all AST nodes."""

    node_type: ClassVar[ASTNodeType]
    token: Token

    def token_literal(self) -> str:
        """Literal of the token that introduced this node."""
        return self.token.literal

    def children(self) -> List['ASTNode']:
        """Get all child nodes, in source order."""
        return []


class Statement(ASTNode):
    """Base class for statements."""


class Expression(ASTNode):
    """Base class for expressions."""


# ============================================================================
# Expressions
# ============================================================================

@dataclass(frozen=True)
class Identifier(Expression):
    """Name reference, also used as the bound name of a let statement."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.IDENTIFIER

    token: Token
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerLiteral(Expression):
    """Signed 64-bit integer literal."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.INTEGER_LITERAL

    token: Token
    value: int

    def __str__(self) -> str:
        return self.token.literal


@dataclass(frozen=True)
class PrefixExpression(Expression):
    """Unary operation such as !ok or -x."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PREFIX_EXPRESSION

    token: Token
    operator: PrefixOperator
    right: Expression

    def children(self) -> List[ASTNode]:
        return [self.right]

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass(frozen=True)
class InfixExpression(Expression):
    """Binary operation; token is the operator token."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.INFIX_EXPRESSION

    token: Token
    left: Expression
    operator: InfixOperator
    right: Expression

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


# ============================================================================
# Statements
# ============================================================================

@dataclass(frozen=True)
class LetStatement(Statement):
    """let <name> = <value>;"""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.LET_STATEMENT

    token: Token
    name: Identifier
    value: Expression

    def children(self) -> List[ASTNode]:
        return [self.name, self.value]

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"


@dataclass(frozen=True)
class ReturnStatement(Statement):
    """return <value>;"""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.RETURN_STATEMENT

    token: Token
    value: Expression

    def children(self) -> List[ASTNode]:
        return [self.value]

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.value};"


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    """A bare expression used as a statement; token is its first token."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.EXPRESSION_STATEMENT

    token: Token
    expression: Expression

    def children(self) -> List[ASTNode]:
        return [self.expression]

    def __str__(self) -> str:
        return str(self.expression)


# ============================================================================
# Top-level
# ============================================================================

@dataclass(frozen=True)
class Program(ASTNode):
    """Root AST node; statements are kept in parse (execution) order."""
    node_type: ClassVar[ASTNodeType] = ASTNodeType.PROGRAM

    statements: Tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        return " ".join(statement.token_literal() for statement in self.statements)

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    def __str__(self) -> str:
        return "".join(str(statement) for statement in self.statements)
