"""Syntax tree nodes and their textual forms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from crowlang.tokens import Token


class Node(ABC):
    """Any node of the syntax tree."""

    @abstractmethod
    def token_literal(self) -> str:
        """Return the literal text that identifies this node."""

    @abstractmethod
    def __str__(self) -> str:
        """Return the node rendered as text."""


class Statement(Node, ABC):
    """A node that stands as a statement."""


class Expression(Node, ABC):
    """A node that produces a value."""


@dataclass
class Program(Node):
    """The root of a parsed program."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        return self.statements[0].token_literal() if self.statements else ""

    def __str__(self) -> str:
        return "".join(str(statement) for statement in self.statements)


@dataclass
class Identifier(Expression):
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.value


@dataclass
class LetStatement(Statement):
    token: Token
    name: Identifier
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        rendered = f"{self.token_literal()} {self.name} = "
        if self.value is not None:
            rendered += str(self.value)
        return rendered


@dataclass
class ReturnStatement(Statement):
    token: Token
    return_value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        rendered = f"{self.token_literal()} "
        if self.return_value is not None:
            rendered += str(self.return_value)
        return rendered


@dataclass
class ExpressionStatement(Statement):
    token: Token
    expression: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return "" if self.expression is None else str(self.expression)


@dataclass
class IntegerLiteral(Expression):
    token: Token
    value: int

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class PrefixExpression(Expression):
    """A unary operator applied to an operand; the token is the operator."""

    token: Token
    operand: Expression

    def token_literal(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"({self.token.literal} {self.operand})"


@dataclass
class InfixExpression(Expression):
    """A binary operator between two operands; the token is the operator."""

    left: Expression
    token: Token
    right: Expression

    def token_literal(self) -> str:
        return (
            self.left.token_literal()
            + self.token.literal
            + self.right.token_literal()
        )

    def __str__(self) -> str:
        return f"({self.token.literal} {self.left} {self.right})"


@dataclass
class BooleanExpression(Expression):
    token: Token
    value: bool

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal


@dataclass
class BlockStatement(Statement):
    token: Token
    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        body = "".join(f"{statement}; " for statement in self.statements)
        return "{" + body + "}"


@dataclass
class ConditionalExpression(Expression):
    token: Token
    condition: Expression
    then_block: BlockStatement
    else_block: BlockStatement | None = None

    def token_literal(self) -> str:
        rendered = f"IF ({self.condition}) THEN {self.then_block}"
        if self.else_block is not None:
            rendered += f" ELSE {self.else_block}"
        return rendered

    def __str__(self) -> str:
        return self.token_literal()


@dataclass
class CallExpression(Expression):
    token: Token
    function: Expression
    arguments: list[Expression] = field(default_factory=list)

    def token_literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        args = "".join(f"{argument}, " for argument in self.arguments)
        return f"CALL {self.function}({args})"