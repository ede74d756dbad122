"""Parsed @param tag."""

from __future__ import annotations

from dataclasses import dataclass

from paramdoc.description import Description
from paramdoc.typeexpr import TypeExpression


@dataclass(frozen=True, slots=True)
class Param:
    """A parsed ``@param`` tag: declared type, variable, variadic flag, description.

    ``variable_name`` never carries the ``$`` sigil or the ``...`` marker;
    it is None when the tag body named no variable.
    """

    variable_name: str | None
    declared_type: TypeExpression | None = None
    is_variadic: bool = False
    description: Description | None = None

    def __str__(self) -> str:
        from paramdoc.render import render_param

        return render_param(self)
