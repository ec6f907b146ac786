"""Lox parser — converts a token stream into an expression AST."""

from __future__ import annotations

from collections.abc import Callable

from loxide.ast import Binary, Expr, Grouping, Literal, Unary
from loxide.errors import ParseError
from loxide.reporter import ErrorReporter
from loxide.scanner import scan
from loxide.tokens import Token, TokenType
from loxide.values import FALSE, TRUE


class Parser:
    """Recursive descent parser for a single Lox expression."""

    def __init__(self, tokens: list[Token], reporter: ErrorReporter | None = None) -> None:
        self._tokens = tokens
        self._reporter = reporter if reporter is not None else ErrorReporter()
        self._pos = 0

    def parse(self) -> Expr | None:
        """Parse one expression; return None if a parse error was reported."""
        try:
            return self.parse_expression()
        except ParseError:
            self._synchronize()
            return None

    def parse_expression(self) -> Expr:
        """Parse one expression, raising ParseError on the first violation."""
        return self._expression()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _previous(self) -> Token:
        return self._tokens[self._pos - 1]

    def _at(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _at_eof(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _advance(self) -> Token:
        tok = self._tokens[self._pos]
        if tok.type != TokenType.EOF:
            self._pos += 1
        return tok

    def _match(self, types: frozenset[TokenType]) -> bool:
        if self._peek().type in types:
            self._advance()
            return True
        return False

    def _expect(self, tt: TokenType, message: str) -> Token:
        if not self._at(tt):
            raise self._error(message, self._peek())
        return self._advance()

    def _error(self, message: str, token: Token) -> ParseError:
        err = ParseError(message, token)
        self._reporter.report(err)
        return err

    def _synchronize(self) -> None:
        """Skip tokens up to the next statement boundary."""
        self._advance()
        while not self._at_eof():
            if self._previous().type == TokenType.SEMICOLON:
                return
            if self._at(*_STATEMENT_STARTS):
                return
            self._advance()

    # ------------------------------------------------------------------
    # Grammar, lowest precedence first
    # ------------------------------------------------------------------

    def _expression(self) -> Expr:
        return self._equality()

    def _binary(self, operand: Callable[[], Expr], operators: frozenset[TokenType]) -> Expr:
        """Parse a left-associative chain: operand (op operand)*."""
        expr = operand()
        while self._match(operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def _equality(self) -> Expr:
        return self._binary(self._comparison, _EQUALITY_OPS)

    def _comparison(self) -> Expr:
        return self._binary(self._term, _COMPARISON_OPS)

    def _term(self) -> Expr:
        return self._binary(self._factor, _TERM_OPS)

    def _factor(self) -> Expr:
        return self._binary(self._unary, _FACTOR_OPS)

    def _unary(self) -> Expr:
        if self._match(_UNARY_OPS):
            operator = self._previous()
            return Unary(operator, self._unary())
        return self._primary()

    def _primary(self) -> Expr:
        tok = self._peek()

        if tok.type == TokenType.FALSE:
            self._advance()
            return Literal(FALSE)
        if tok.type == TokenType.TRUE:
            self._advance()
            return Literal(TRUE)
        if tok.type == TokenType.NIL:
            self._advance()
            return Literal(None)
        if tok.type in (TokenType.NUMBER, TokenType.STRING):
            self._advance()
            return Literal(tok.literal)

        if tok.type == TokenType.LEFT_PAREN:
            self._advance()
            expr = self._expression()
            self._expect(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self._error("Expect expression.", tok)


# Module-level constants
_EQUALITY_OPS: frozenset[TokenType] = frozenset({TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL})
_COMPARISON_OPS: frozenset[TokenType] = frozenset(
    {TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL}
)
_TERM_OPS: frozenset[TokenType] = frozenset({TokenType.MINUS, TokenType.PLUS})
_FACTOR_OPS: frozenset[TokenType] = frozenset({TokenType.SLASH, TokenType.STAR})
_UNARY_OPS: frozenset[TokenType] = frozenset({TokenType.BANG, TokenType.MINUS})
_STATEMENT_STARTS: frozenset[TokenType] = frozenset(
    {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }
)


def parse(source: str, reporter: ErrorReporter | None = None) -> Expr | None:
    """Convenience function: scan and parse source text into an expression."""
    if reporter is None:
        reporter = ErrorReporter()
    tokens = scan(source, reporter)
    return Parser(tokens, reporter).parse()
