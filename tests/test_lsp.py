"""Tests for the LSP server — diagnostic generation."""

from __future__ import annotations

import pytest
from lsprotocol.types import (
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from paramdoc.lsp import _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///Math.php") -> None:
        ws.put_text_document(TextDocumentItem(uri=uri, language_id="php", version=0, text=source))

    return ls, published, put


# ---------------------------------------------------------------------------
# Type syntax errors → positioned at the offending character
# ---------------------------------------------------------------------------


class TestTypeErrors:
    def test_unclosed_array_suffix(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("/**\n * @param int[ $x\n */\n")
        _validate(ls, "file:///Math.php")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Error
        assert d.message == "expected ']'"
        assert d.source == "paramdoc"
        # column 15 (1-based) → character 14 (0-based)
        assert d.range.start.line == 1
        assert d.range.start.character == 14
        assert d.range.end.character == 15


# ---------------------------------------------------------------------------
# Precondition failures → cover the tag body
# ---------------------------------------------------------------------------


class TestEmptyBody:
    def test_empty_param_tag(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("/**\n * @param\n */\n")
        _validate(ls, "file:///Math.php")

        diags = published[0].diagnostics
        assert len(diags) == 1
        assert diags[0].message == "tag body must not be empty"
        assert diags[0].range.start.line == 1


# ---------------------------------------------------------------------------
# Every broken tag is reported
# ---------------------------------------------------------------------------


class TestMultipleErrors:
    def test_all_tags_checked(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("/**\n * @param int[ $x\n * @param int $ok\n * @param array<int $y\n */\n")
        _validate(ls, "file:///Math.php")

        diags = published[0].diagnostics
        assert [d.range.start.line for d in diags] == [1, 3]


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("<?php\n/**\n * @param int $a first\n * @param string ...$rest\n */\n")
        _validate(ls, "file:///Math.php")

        assert len(published) == 1
        assert published[0].diagnostics == []

    def test_no_tags(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("<?php echo 1;\n")
        _validate(ls, "file:///Math.php")

        assert published[0].diagnostics == []
