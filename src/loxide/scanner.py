"""Lox scanner — converts source text into a flat token stream."""

from __future__ import annotations

from loxide.errors import ScanError
from loxide.reporter import ErrorReporter
from loxide.tokens import (
    EQUAL_PAIRS,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
    is_alpha,
    is_alphanumeric,
    is_digit,
)
from loxide.values import Number, Text


class Scanner:
    """Tokenize Lox source text into a list of Token objects.

    Invalid input never stops the scan: each bad lexeme is reported and
    skipped, and the result always ends with a single EOF token.
    """

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self._source = source
        self._reporter = reporter if reporter is not None else ErrorReporter()
        self._tokens: list[Token] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list."""
        while not self._at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._at_end() or self._source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._at_end():
            return ""
        return self._source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self._source):
            return ""
        return self._source[self._current + 1]

    def _add_token(self, tt: TokenType, literal: Number | Text | None = None) -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(tt, lexeme, literal, self._line))

    def _error(self, message: str) -> None:
        self._reporter.report(ScanError(message, self._line))

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[ch])
            return

        if ch in EQUAL_PAIRS:
            with_equal, alone = EQUAL_PAIRS[ch]
            self._add_token(with_equal if self._match("=") else alone)
            return

        if ch == "/":
            if self._match("/"):
                # Line comment runs to the newline, which is left for the line count
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch in " \r\t":
            return

        if ch == "\n":
            self._line += 1
            return

        if ch == '"':
            self._string()
            return

        if is_digit(ch):
            self._number()
            return

        if is_alpha(ch):
            self._identifier()
            return

        self._error("Unexpected character.")

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self._error("Unterminated string.")
            return

        self._advance()  # closing quote
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, Text(value))

    def _number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        # A fractional part needs at least one digit after the dot
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        text = self._source[self._start : self._current]
        self._add_token(TokenType.NUMBER, Number(float(text)))

    def _identifier(self) -> None:
        while is_alphanumeric(self._peek()):
            self._advance()
        text = self._source[self._start : self._current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Convenience function: scan source text and return the token list."""
    return Scanner(source, reporter).scan_tokens()
