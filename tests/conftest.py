"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from paramdoc import parse
from paramdoc.ast import Param
from paramdoc.description import Description
from paramdoc.typeexpr import Context, Keyword


class RecordingResolver:
    """Type resolver returning Keyword(token) and recording every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Context | None]] = []

    def resolve(self, token: str, context: Context | None) -> Keyword:
        self.calls.append((token, context))
        return Keyword(token)


class RecordingFactory:
    """Description factory keeping the text verbatim and recording every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Context | None]] = []

    def create(self, text: str, context: Context | None) -> Description:
        self.calls.append((text, context))
        return Description((text,) if text else ())


@pytest.fixture
def resolver() -> RecordingResolver:
    return RecordingResolver()


@pytest.fixture
def factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def parse_body():
    """Return a helper that parses a tag body with the default collaborators."""

    def _parse(body: str, context: Context | None = None) -> Param:
        return parse(body, context)

    return _parse
