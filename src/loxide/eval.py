"""Tree-walk evaluator — reduces an expression AST to a runtime Value."""

from __future__ import annotations

import math
from collections.abc import Callable

from loxide.ast import Binary, Expr, Grouping, Literal, Unary
from loxide.errors import EvalError
from loxide.tokens import Token, TokenType
from loxide.values import (
    NIL,
    Number,
    Text,
    Value,
    boolean,
    is_truthy,
    values_equal,
)


def evaluate(expr: Expr) -> Value:
    """Evaluate an expression. Raises EvalError on type or operator violations."""
    if isinstance(expr, Literal):
        return NIL if expr.value is None else expr.value
    if isinstance(expr, Grouping):
        return evaluate(expr.expression)
    if isinstance(expr, Unary):
        return _eval_unary(expr)
    if isinstance(expr, Binary):
        return _eval_binary(expr)
    raise TypeError(f"not an expression node: {type(expr).__name__}")


# ---------------------------------------------------------------------------
# Unary
# ---------------------------------------------------------------------------


def _eval_unary(node: Unary) -> Value:
    right = evaluate(node.right)
    op = node.operator

    if op.type == TokenType.BANG:
        return boolean(not is_truthy(right))

    if op.type == TokenType.MINUS:
        if not isinstance(right, Number):
            raise EvalError("Operand must be a number.", op)
        return Number(-right.value)

    raise EvalError("Invalid unary operator.", op)


# ---------------------------------------------------------------------------
# Binary
# ---------------------------------------------------------------------------


def _divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity, 0/0 is NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# Operators that take two numbers; comparisons produce Boolean, the rest Number
_ARITHMETIC: dict[TokenType, Callable[[float, float], float]] = {
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.STAR: lambda a, b: a * b,
    TokenType.SLASH: _divide,
}

_COMPARISON: dict[TokenType, Callable[[float, float], bool]] = {
    TokenType.GREATER: lambda a, b: a > b,
    TokenType.GREATER_EQUAL: lambda a, b: a >= b,
    TokenType.LESS: lambda a, b: a < b,
    TokenType.LESS_EQUAL: lambda a, b: a <= b,
}


def _eval_binary(node: Binary) -> Value:
    left = evaluate(node.left)
    right = evaluate(node.right)
    op = node.operator

    if op.type == TokenType.EQUAL_EQUAL:
        return boolean(values_equal(left, right))
    if op.type == TokenType.BANG_EQUAL:
        return boolean(not values_equal(left, right))

    if op.type == TokenType.PLUS:
        return _add(left, right, op)

    if op.type in _ARITHMETIC:
        a, b = _number_operands(left, right, op)
        return Number(_ARITHMETIC[op.type](a, b))

    if op.type in _COMPARISON:
        a, b = _number_operands(left, right, op)
        return boolean(_COMPARISON[op.type](a, b))

    raise EvalError("Invalid binary operator.", op)


def _add(left: Value, right: Value, op: Token) -> Value:
    if isinstance(left, Number) and isinstance(right, Number):
        return Number(left.value + right.value)
    if isinstance(left, Text) and isinstance(right, Text):
        return Text(left.value + right.value)
    raise EvalError("Operands must be two numbers or two strings.", op)


def _number_operands(left: Value, right: Value, op: Token) -> tuple[float, float]:
    if not isinstance(left, Number) or not isinstance(right, Number):
        raise EvalError("Operands must be numbers.", op)
    return left.value, right.value
