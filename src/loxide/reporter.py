"""Diagnostic sink shared by the scanner, parser, and shell."""

from __future__ import annotations

import sys

from loxide.errors import EvalError, LoxError


class ErrorReporter:
    """Collect diagnostics and echo them to stderr.

    With ``echo=False`` errors are only collected, which is what the
    language server wants.
    """

    def __init__(self, echo: bool = True) -> None:
        self.echo = echo
        self.errors: list[LoxError] = []

    @property
    def had_error(self) -> bool:
        """True if a scan or parse error was reported since the last reset."""
        return any(not isinstance(e, EvalError) for e in self.errors)

    @property
    def had_runtime_error(self) -> bool:
        return any(isinstance(e, EvalError) for e in self.errors)

    def report(self, error: LoxError) -> None:
        self.errors.append(error)
        if self.echo:
            print(error.format(), file=sys.stderr)

    def reset(self) -> None:
        self.errors.clear()
