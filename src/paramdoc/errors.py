"""Error types with formatted source context."""

from __future__ import annotations

from paramdoc.tokens import Span


class InvalidArgument(ValueError):
    """Raised before any parsing work when an input precondition is violated."""


class TypeSyntaxError(Exception):
    """Raised on the first malformed construct in a type expression."""

    def __init__(self, message: str, offset: int, source: str) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        super().__init__(self.format())

    def format(self) -> str:
        # Underline one character, or the end of the token when past it
        pad = " " * min(self.offset, len(self.source))
        return f"error: {self.message}\n  | {self.source}\n  | {pad}^"


class TagError(Exception):
    """Raised on the first @param tag in a file that fails to parse."""

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.span.start.line - 1
        col = self.span.start.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the full span when on one line, otherwise to end of line
        if self.span.end.line == self.span.start.line:
            underline_len = max(1, self.span.end.column - col)
        else:
            underline_len = max(1, len(source_line) - col + 1)

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.span.start.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.span.start.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
