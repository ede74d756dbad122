"""Locate @param tags in comment blocks and parse them with source positions."""

from __future__ import annotations

from dataclasses import dataclass

from paramdoc.ast import Param
from paramdoc.errors import InvalidArgument, TagError, TypeSyntaxError
from paramdoc.parser import DescriptionFactoryLike, TypeResolverLike, parse_param
from paramdoc.tokens import Position, Span, is_blank
from paramdoc.typeexpr import Context

TAG = "@param"

# Comment decoration stripped from the start of a line, longest first
_LINE_PREFIXES = ("/**", "///", "//", "*", "#")


@dataclass(frozen=True, slots=True)
class TagOccurrence:
    """Raw body of one @param tag and where it sits in the source."""

    body: str
    span: Span


@dataclass(frozen=True, slots=True)
class ParamOccurrence:
    """A parsed @param tag and the span of its body."""

    param: Param
    span: Span


@dataclass(slots=True)
class _Line:
    text: str  # content after decoration
    number: int  # 1-based
    column: int  # 1-based column of text[0]
    offset: int  # offset of text[0] in the source
    closes: bool  # the line ends a comment block


def find_param_tags(source: str) -> list[TagOccurrence]:
    """Return every @param tag body in *source*, in order."""
    found: list[TagOccurrence] = []
    current: list[_Line] = []
    start: Position | None = None

    def finish() -> None:
        nonlocal current, start
        if start is not None:
            found.append(_occurrence(current, start))
        current = []
        start = None

    for line in _split_lines(source):
        content = line.text.strip()
        if content.startswith(TAG) and (len(content) == len(TAG) or content[len(TAG)].isspace()):
            finish()
            lead = len(line.text) - len(line.text.lstrip())
            after = line.text[lead + len(TAG) :]
            gap = len(after) - len(after.lstrip())
            skip = lead + len(TAG) + gap
            line.text = line.text[skip:]
            line.column += skip
            line.offset += skip
            start = Position(line.number, line.column, line.offset)
            current = [line]
        elif start is not None:
            if is_blank(content) or content.startswith("@"):
                finish()
            else:
                current.append(line)
        if line.closes:
            finish()

    finish()
    return found


def collect_params(
    source: str,
    type_resolver: TypeResolverLike,
    description_factory: DescriptionFactoryLike,
    context: Context | None = None,
) -> list[ParamOccurrence]:
    """Parse every @param tag in *source*.

    The first tag that fails raises TagError positioned at its body.
    """
    result: list[ParamOccurrence] = []
    for occ in find_param_tags(source):
        try:
            param = parse_param(occ.body, type_resolver, description_factory, context)
        except TypeSyntaxError as exc:
            raise TagError(exc.message, type_error_span(occ, exc), source) from exc
        except InvalidArgument as exc:
            raise TagError(str(exc), occ.span, source) from exc
        result.append(ParamOccurrence(param, occ.span))
    return result


def type_error_span(occ: TagOccurrence, exc: TypeSyntaxError) -> Span:
    """Map a type syntax error back to a one-character source span.

    The type token is the first fragment of the body, so its offsets line up
    with the start of the body.
    """
    start = occ.span.start
    column = start.column + exc.offset
    pos = Position(start.line, column, start.offset + exc.offset)
    return Span(pos, Position(start.line, column + 1, pos.offset + 1))


def _occurrence(lines: list[_Line], start: Position) -> TagOccurrence:
    texts = [line.text.rstrip() for line in lines]
    last = lines[-1]
    end_col = last.column + len(texts[-1])
    end = Position(last.number, end_col, last.offset + len(texts[-1]))
    return TagOccurrence("\n".join(texts), Span(start, end))


def _split_lines(source: str) -> list[_Line]:
    lines: list[_Line] = []
    offset = 0
    for number, raw in enumerate(source.splitlines(keepends=True), start=1):
        text = raw.rstrip("\r\n")
        lead = len(text) - len(text.lstrip())
        rest = text[lead:]
        closes = False

        if rest.endswith("*/"):
            rest = rest[:-2]
            closes = True
        for prefix in _LINE_PREFIXES:
            if rest.startswith(prefix):
                lead += len(prefix)
                rest = rest[len(prefix) :]
                break

        lines.append(_Line(rest, number, lead + 1, offset + lead, closes))
        offset += len(raw)
    return lines
