"""Error types for the scan, parse, and evaluation stages."""

from __future__ import annotations

from loxide.tokens import Token, TokenType


class LoxError(Exception):
    """Base for all pipeline diagnostics, keyed by source line."""

    def __init__(self, message: str, line: int, location: str = "") -> None:
        self.message = message
        self.line = line
        self.location = location
        super().__init__(self.format())

    def format(self) -> str:
        return f"[line {self.line}] Error {self.location}: {self.message}"


class ScanError(LoxError):
    """Malformed lexeme: unterminated string or unrecognized character."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message, line)


class ParseError(LoxError):
    """Grammar violation, located at the offending token."""

    def __init__(self, message: str, token: Token) -> None:
        self.token = token
        if token.type == TokenType.EOF:
            location = "at end"
        else:
            location = f"at '{token.lexeme}'"
        super().__init__(message, token.line, location)


class EvalError(LoxError):
    """Raised on runtime type or operator violations during evaluation."""

    def __init__(self, message: str, token: Token) -> None:
        self.token = token
        super().__init__(message, token.line)
