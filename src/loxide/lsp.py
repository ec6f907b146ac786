"""Minimal LSP server for Lox — diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from loxide import __version__, interpret
from loxide.errors import EvalError, LoxError
from loxide.reporter import ErrorReporter

server = LanguageServer("loxide-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _to_diagnostic(error: LoxError, lines: list[str]) -> Diagnostic:
    """Errors carry only a line number, so the range covers the whole line."""
    line = error.line - 1
    width = len(lines[line]) if 0 <= line < len(lines) else 0
    message = error.message
    if error.location:
        message = f"{message} ({error.location})"
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=0),
            end=Position(line=line, character=width),
        ),
        message=message,
        severity=(
            DiagnosticSeverity.Warning
            if isinstance(error, EvalError)
            else DiagnosticSeverity.Error
        ),
        source="loxide",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Run the Lox pipeline and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    reporter = ErrorReporter(echo=False)

    # An empty buffer is not an error while editing
    if source.strip():
        interpret(source, reporter)

    lines = source.splitlines()
    diagnostics = [_to_diagnostic(err, lines) for err in reporter.errors]
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
