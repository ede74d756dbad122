"""Render a parsed @param tag back to its display form."""

from __future__ import annotations

from paramdoc.ast import Param
from paramdoc.tokens import SIGIL, VARIADIC


def render_param(param: Param) -> str:
    """Return ``[type] [...][$name] [description]``, omitting absent pieces."""
    pieces: list[str] = []
    if param.declared_type is not None:
        type_text = str(param.declared_type)
        # A leading $ ($this, $this[]) would read back as the variable
        if type_text.startswith(SIGIL):
            type_text = f"({type_text})"
        pieces.append(type_text)

    variable = VARIADIC if param.is_variadic else ""
    if param.variable_name is not None:
        variable += SIGIL + param.variable_name
    if variable:
        pieces.append(variable)

    if param.description is not None:
        text = str(param.description)
        if text:
            pieces.append(text)

    return " ".join(pieces)
