"""Free-text descriptions with inline tags, and the factory that builds them."""

from __future__ import annotations

from dataclasses import dataclass

from paramdoc.tokens import is_blank
from paramdoc.typeexpr import Context


@dataclass(frozen=True, slots=True)
class InlineTag:
    """An inline ``{@name body}`` tag inside a description."""

    name: str
    body: str

    def __str__(self) -> str:
        if self.body:
            return f"{{@{self.name} {self.body}}}"
        return f"{{@{self.name}}}"


@dataclass(frozen=True, slots=True)
class Description:
    """Description text as a sequence of literal strings and inline tags."""

    parts: tuple[str | InlineTag, ...] = ()

    @property
    def tags(self) -> tuple[InlineTag, ...]:
        return tuple(p for p in self.parts if isinstance(p, InlineTag))

    @property
    def text(self) -> str:
        """Plain text, each inline tag replaced by its body (or name)."""
        out: list[str] = []
        for part in self.parts:
            if isinstance(part, InlineTag):
                out.append(part.body or part.name)
            else:
                out.append(part)
        return "".join(out)

    def __str__(self) -> str:
        out: list[str] = []
        literal: list[str] = []
        for part in self.parts:
            if isinstance(part, InlineTag):
                out.append(escape_text("".join(literal)))
                literal = []
                out.append(str(part))
            else:
                literal.append(part)
        out.append(escape_text("".join(literal)))
        return "".join(out)


def escape_text(text: str) -> str:
    """Escape literal ``}`` and ``{@`` so the text reads back unchanged."""
    out: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "}":
            out.append("{}")
        elif text.startswith("{@", i):
            out.append("{{@}")
            i += 1
        else:
            out.append(text[i])
        i += 1
    return "".join(out)


class DescriptionFactory:
    """Build a Description from the raw text remaining in a tag body."""

    def create(self, text: str, context: Context | None = None) -> Description:
        text = dedent_continuation(text.replace("\r\n", "\n").rstrip())
        if not text:
            return Description()
        return Description(_InlineScanner(text).scan())


def dedent_continuation(text: str) -> str:
    """Remove the common indentation of every line after the first.

    The first line starts right after the tag's variable and carries no
    indentation of its own. Blank lines do not count towards the common
    indentation and are emptied.
    """
    lines = text.split("\n")
    if len(lines) < 2:
        return text

    rest = lines[1:]
    indents = [len(line) - len(line.lstrip()) for line in rest if not is_blank(line)]
    if not indents:
        return "\n".join([lines[0]] + ["" for _ in rest])

    strip = min(indents)
    return "\n".join([lines[0]] + ["" if is_blank(line) else line[strip:] for line in rest])


class _InlineScanner:
    """Split description text into literal runs and ``{@...}`` inline tags."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._parts: list[str | InlineTag] = []
        self._text: list[str] = []

    def scan(self) -> tuple[str | InlineTag, ...]:
        while self._pos < len(self._source):
            if self._source.startswith("{@}", self._pos):
                self._text.append("@")
                self._pos += 3
            elif self._source.startswith("{}", self._pos):
                self._text.append("}")
                self._pos += 2
            elif self._source.startswith("{@", self._pos):
                self._scan_tag()
            else:
                self._text.append(self._source[self._pos])
                self._pos += 1
        self._flush()
        return tuple(self._parts)

    def _flush(self) -> None:
        if self._text:
            self._parts.append("".join(self._text))
            self._text = []

    def _scan_tag(self) -> None:
        end = self._find_close(self._pos + 2)
        if end < 0:
            # Unterminated: keep the opener as literal text
            self._text.append("{@")
            self._pos += 2
            return

        pieces = self._source[self._pos + 2 : end].split(None, 1)
        if not pieces:
            # No tag name: the braces are literal text
            self._text.append(self._source[self._pos : end + 1])
            self._pos = end + 1
            return

        name = pieces[0]
        body = pieces[1].strip() if len(pieces) > 1 else ""
        self._flush()
        self._parts.append(InlineTag(name, body))
        self._pos = end + 1

    def _find_close(self, start: int) -> int:
        """Return the index of the brace closing a tag body, or -1."""
        depth = 0
        for i in range(start, len(self._source)):
            ch = self._source[i]
            if ch == "{":
                depth += 1
            elif ch == "}":
                if depth == 0:
                    return i
                depth -= 1
        return -1
