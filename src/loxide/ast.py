"""AST node types for Lox expressions."""

from __future__ import annotations

from dataclasses import dataclass

from loxide.tokens import Token
from loxide.values import Value


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal value; None is the nil literal."""

    value: Value | None


@dataclass(frozen=True, slots=True)
class Grouping:
    """Parenthesized expression."""

    expression: Expr


@dataclass(frozen=True, slots=True)
class Unary:
    """Prefix operator: '!' or '-'."""

    operator: Token
    right: Expr


@dataclass(frozen=True, slots=True)
class Binary:
    """Infix operator with left and right operands."""

    left: Expr
    operator: Token
    right: Expr


Expr = Literal | Grouping | Unary | Binary
