"""Minimal LSP server for @param tags — diagnostics only."""

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

from paramdoc import __version__
from paramdoc.description import DescriptionFactory
from paramdoc.docblock import find_param_tags, type_error_span
from paramdoc.errors import InvalidArgument, TypeSyntaxError
from paramdoc.parser import parse_param
from paramdoc.resolver import TypeResolver
from paramdoc.tokens import Span

server = LanguageServer(
    "paramdoc-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)

_resolver = TypeResolver()
_factory = DescriptionFactory()


def _range(span: Span) -> Range:
    """Convert a 1-based source span to a 0-based LSP range."""
    return Range(
        start=Position(line=span.start.line - 1, character=span.start.column - 1),
        end=Position(line=span.end.line - 1, character=span.end.column - 1),
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Parse every @param tag in the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    for occ in find_param_tags(doc.source):
        try:
            parse_param(occ.body, _resolver, _factory)
        except TypeSyntaxError as exc:
            span = type_error_span(occ, exc)
            message = exc.message
        except InvalidArgument as exc:
            span = occ.span
            message = str(exc)
        else:
            continue
        diagnostics.append(
            Diagnostic(
                range=_range(span),
                message=message,
                severity=DiagnosticSeverity.Error,
                source="paramdoc",
            )
        )

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
