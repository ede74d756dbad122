"""Parser for the bodies of @param documentation tags."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paramdoc.ast import Param
    from paramdoc.typeexpr import Context

__version__ = "0.1.0"


def parse(body: str, context: Context | None = None) -> Param:
    """Parse a @param tag body with the default type resolver and description factory."""
    from paramdoc.description import DescriptionFactory
    from paramdoc.parser import parse_param
    from paramdoc.resolver import TypeResolver

    return parse_param(body, TypeResolver(), DescriptionFactory(), context)
