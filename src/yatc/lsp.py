"""Minimal LSP server for yatc: diagnostics only."""

from __future__ import annotations

import logging

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

from yatc import __version__
from yatc.errors import LexError, ParseError
from yatc.lexer import tokenize
from yatc.parser import parse
from yatc.tokens import position_at

logger = logging.getLogger(__name__)

server = LanguageServer("yatc-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _lsp_position(source: str, offset: int) -> Position:
    pos = position_at(source, offset)
    return Position(line=pos.line - 1, character=pos.column - 1)


def _diagnostic(source: str, start: int, end: int, message: str) -> Diagnostic:
    return Diagnostic(
        range=Range(start=_lsp_position(source, start), end=_lsp_position(source, end)),
        message=message,
        severity=DiagnosticSeverity.Error,
        source="yatc",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Run the lexer and parser and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    source = doc.source
    diagnostics: list[Diagnostic] = []

    try:
        parse(tokenize(source), source)
    except LexError as exc:
        diagnostics.append(_diagnostic(source, exc.offset, exc.offset + 1, exc.message))
    except ParseError as exc:
        end = exc.token.span.end if exc.token is not None else exc.offset
        diagnostics.append(_diagnostic(source, exc.offset, end, exc.message))

    logger.debug("%s: %d diagnostic(s)", uri, len(diagnostics))
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
