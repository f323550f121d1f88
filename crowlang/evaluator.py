"""Tree-walking evaluation of syntax trees."""

from __future__ import annotations

from collections.abc import Iterable

from crowlang.ast import (
    BlockStatement,
    BooleanExpression,
    ConditionalExpression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    Node,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from crowlang.environment import Environment
from crowlang.objects import Boolean, Integer, Null, Object, ReturnValue
from crowlang.tokens import TokenType

NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)

_INT64_MIN = -(1 << 63)
_INT64_SPAN = 1 << 64


class EvaluationError(Exception):
    """Raised when an expression cannot be evaluated at all."""


def _wrap(value: int) -> int:
    """Reduce ``value`` to a signed 64-bit integer, wrapping on overflow."""
    return (value - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


def _to_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def is_truthy(value: Object | None) -> bool:
    """Return whether ``value`` counts as true in a condition."""
    if isinstance(value, Boolean):
        return value.value
    return not isinstance(value, Null)


def evaluate(node: Node | None, env: Environment) -> Object | None:
    """Evaluate ``node`` in ``env`` and return the resulting value."""
    match node:
        case Program(statements=statements):
            return _eval_program(statements, env)
        case LetStatement(name=name, value=value_node):
            value = evaluate(value_node, env)
            if env.get(name.value) is None:
                env.set(name.value, value)
            return value
        case ExpressionStatement(expression=expression):
            return evaluate(expression, env)
        case PrefixExpression(token=token, operand=operand):
            return _eval_prefix(token.type, evaluate(operand, env))
        case IntegerLiteral(value=value):
            return Integer(value)
        case BooleanExpression(value=value):
            return _to_boolean(value)
        case InfixExpression(left=left, token=token, right=right):
            return _eval_infix(evaluate(left, env), token.type, evaluate(right, env))
        case ConditionalExpression(
            condition=condition, then_block=then_block, else_block=else_block
        ):
            if is_truthy(evaluate(condition, env)):
                return evaluate(then_block, env)
            if else_block is None:
                return NULL
            return evaluate(else_block, env)
        case BlockStatement(statements=statements):
            return _eval_block(statements, env)
        case ReturnStatement(return_value=return_value):
            return ReturnValue(evaluate(return_value, env))
        case Identifier(value=name):
            return env.get(name)
    return None


def _eval_program(statements: Iterable[Statement], env: Environment) -> Object | None:
    result: Object | None = None
    for statement in statements:
        result = evaluate(statement, env)
        if isinstance(result, ReturnValue):
            return result.value
    return result


def _eval_block(statements: Iterable[Statement], env: Environment) -> Object | None:
    result: Object | None = None
    for statement in statements:
        result = evaluate(statement, env)
        if isinstance(result, ReturnValue):
            return result
    return result


def _eval_prefix(operator: TokenType, operand: Object | None) -> Object:
    if operator is TokenType.BANG:
        return _to_boolean(not is_truthy(operand))
    if operator is TokenType.MINUS:
        if isinstance(operand, Integer):
            return Integer(_wrap(-operand.value))
        return NULL
    return NULL


def _eval_infix(left: Object | None, operator: TokenType, right: Object | None) -> Object:
    if left is None or right is None:
        raise EvaluationError(f"operator {operator} applied to a missing value")
    if isinstance(left, Integer) and isinstance(right, Integer):
        return _eval_integer_infix(left.value, operator, right.value)
    if isinstance(left, Boolean) and isinstance(right, Boolean):
        return _eval_boolean_infix(left.value, operator, right.value)
    return NULL


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _eval_integer_infix(left: int, operator: TokenType, right: int) -> Object:
    match operator:
        case TokenType.PLUS:
            return Integer(_wrap(left + right))
        case TokenType.MINUS:
            return Integer(_wrap(left - right))
        case TokenType.ASTERISK:
            return Integer(_wrap(left * right))
        case TokenType.SLASH:
            if right == 0:
                raise ZeroDivisionError("integer division by zero")
            return Integer(_wrap(_truncating_div(left, right)))
        case TokenType.EQUAL:
            return _to_boolean(left == right)
        case TokenType.NEQUAL:
            return _to_boolean(left != right)
        case TokenType.LT:
            return _to_boolean(left < right)
        case TokenType.GT:
            return _to_boolean(left > right)
    return NULL


def _eval_boolean_infix(left: bool, operator: TokenType, right: bool) -> Object:
    if operator is TokenType.EQUAL:
        return _to_boolean(left == right)
    if operator is TokenType.NEQUAL:
        return _to_boolean(left != right)
    return NULL