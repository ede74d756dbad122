"""Source positions and whitespace fragment splitting for tag bodies."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Name sigil and variadic marker of a variable token
SIGIL = "$"
VARIADIC = "..."

# Unicode-aware: \s on str patterns matches every Unicode whitespace character
_WS_RUN = re.compile(r"(\s+)")


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


def split_fragments(body: str, max_splits: int = 2) -> list[str]:
    """Split *body* on whitespace runs, keeping the runs as fragments.

    At most *max_splits* splits are made, so the result alternates content and
    whitespace fragments and the final fragment keeps the rest of the text
    verbatim (internal whitespace included):

    >>> split_fragments("int $x the  value")
    ['int', ' ', '$x', ' ', 'the  value']

    A leading whitespace run produces an empty first fragment.
    """
    return _WS_RUN.split(body, maxsplit=max_splits)


def is_variable_token(fragment: str) -> bool:
    """Return True if *fragment* names a variable (``$name`` or ``...$name``)."""
    return fragment.startswith(SIGIL) or fragment.startswith(VARIADIC + SIGIL)


def is_blank(line: str) -> bool:
    """Return True if *line* is empty or whitespace-only."""
    return not line.strip()
