"""Tree-walking interpreter for Lox expressions."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from loxide.reporter import ErrorReporter
    from loxide.values import Value

__version__ = "0.1.0"


def interpret(
    source: str,
    reporter: ErrorReporter | None = None,
    *,
    trace: TextIO | None = None,
) -> Value | None:
    """Scan, parse, and evaluate Lox source.

    Errors are sent to *reporter*. Scan errors are recovered from, so any
    expression the parser still builds is evaluated; a parse or runtime
    error yields None. If *trace* is given, the tokens and the AST are
    dumped to it first.
    """
    from loxide.debug import dump_ast, dump_tokens
    from loxide.errors import EvalError
    from loxide.eval import evaluate
    from loxide.parser import Parser
    from loxide.reporter import ErrorReporter
    from loxide.scanner import scan

    if reporter is None:
        reporter = ErrorReporter()

    tokens = scan(source, reporter)
    if trace is not None:
        dump_tokens(tokens, file=trace)

    expr = Parser(tokens, reporter).parse()
    if expr is None:
        return None
    if trace is not None:
        dump_ast(expr, file=trace)

    try:
        return evaluate(expr)
    except EvalError as exc:
        reporter.report(exc)
        return None
