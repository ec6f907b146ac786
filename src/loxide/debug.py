"""--debug token and AST dumps, plus the parenthesized AST printer."""

from __future__ import annotations

import sys
from typing import TextIO

from loxide.ast import Binary, Expr, Grouping, Literal, Unary
from loxide.tokens import Token
from loxide.values import stringify


def format_ast(expr: Expr) -> str:
    """Render an expression in prefix form, e.g. ``(* (- 123) (group 45.67))``."""
    if isinstance(expr, Literal):
        return stringify(expr.value)
    if isinstance(expr, Grouping):
        return _parenthesize("group", expr.expression)
    if isinstance(expr, Unary):
        return _parenthesize(expr.operator.lexeme, expr.right)
    if isinstance(expr, Binary):
        return _parenthesize(expr.operator.lexeme, expr.left, expr.right)
    raise TypeError(f"not an expression node: {type(expr).__name__}")


def _parenthesize(name: str, *exprs: Expr) -> str:
    parts = [name, *(format_ast(e) for e in exprs)]
    return "(" + " ".join(parts) + ")"


def dump_tokens(tokens: list[Token], *, file: TextIO | None = None) -> None:
    """Print one token per line, prefixed by its source line."""
    f = file if file is not None else sys.stderr
    for tok in tokens:
        f.write(f"{tok.line:>4} {tok}\n")


def dump_ast(expr: Expr, *, file: TextIO | None = None) -> None:
    """Print a human-readable AST tree to *file* (stderr by default)."""
    _dump_node(expr, 0, file if file is not None else sys.stderr)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_node(node: Expr, depth: int, f: TextIO) -> None:
    if isinstance(node, Literal):
        if node.value is None:
            f.write(f"{_indent(depth)}Literal nil\n")
        else:
            f.write(f"{_indent(depth)}Literal {type(node.value).__name__}({node.value.value!r})\n")
    elif isinstance(node, Grouping):
        f.write(f"{_indent(depth)}Grouping\n")
        _dump_node(node.expression, depth + 1, f)
    elif isinstance(node, Unary):
        f.write(f"{_indent(depth)}Unary {node.operator.lexeme}\n")
        _dump_node(node.right, depth + 1, f)
    elif isinstance(node, Binary):
        f.write(f"{_indent(depth)}Binary {node.operator.lexeme}\n")
        _dump_node(node.left, depth + 1, f)
        _dump_node(node.right, depth + 1, f)
