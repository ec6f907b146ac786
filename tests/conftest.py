"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxide.ast import Expr
from loxide.eval import evaluate
from loxide.parser import Parser
from loxide.reporter import ErrorReporter
from loxide.scanner import scan
from loxide.tokens import Token, TokenType
from loxide.values import Value


@pytest.fixture
def reporter() -> ErrorReporter:
    """A reporter that collects errors without writing to stderr."""
    return ErrorReporter(echo=False)


@pytest.fixture
def lex(reporter):
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = scan(source, reporter)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_source(reporter):
    """Return a helper that parses source into an expression (or None)."""

    def _parse(source: str) -> Expr | None:
        return Parser(scan(source, reporter), reporter).parse()

    return _parse


@pytest.fixture
def run():
    """Return a helper that parses and evaluates source, raising on any error."""

    def _run(source: str) -> Value:
        quiet = ErrorReporter(echo=False)
        expr = Parser(scan(source, quiet), quiet).parse_expression()
        assert not quiet.errors, f"unexpected errors: {[e.format() for e in quiet.errors]}"
        return evaluate(expr)

    return _run


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
