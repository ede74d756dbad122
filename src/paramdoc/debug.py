"""--debug tree dump of parsed tags to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from paramdoc.ast import Param
from paramdoc.description import Description, InlineTag
from paramdoc.typeexpr import (
    ArrayOf,
    ClassName,
    Compound,
    Keyword,
    Nullable,
    TypeExpression,
)


def dump_param(param: Param, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable tree of *param* to *file*."""
    _dump_param(param, 0, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_param(param: Param, depth: int, f: TextIO) -> None:
    name = "-" if param.variable_name is None else f"${param.variable_name}"
    variadic = " variadic" if param.is_variadic else ""
    f.write(f"{_indent(depth)}Param {name}{variadic}\n")
    if param.declared_type is not None:
        _dump_type(param.declared_type, depth + 1, f)
    if param.description is not None:
        _dump_description(param.description, depth + 1, f)


def _dump_type(node: TypeExpression, depth: int, f: TextIO) -> None:
    if isinstance(node, Keyword):
        f.write(f"{_indent(depth)}Keyword {node.name}\n")
    elif isinstance(node, ClassName):
        f.write(f"{_indent(depth)}ClassName {node}\n")
    elif isinstance(node, Nullable):
        f.write(f"{_indent(depth)}Nullable\n")
        _dump_type(node.inner, depth + 1, f)
    elif isinstance(node, ArrayOf):
        f.write(f"{_indent(depth)}ArrayOf\n")
        if node.key is not None:
            f.write(f"{_indent(depth + 1)}key:\n")
            _dump_type(node.key, depth + 2, f)
        _dump_type(node.value, depth + 1, f)
    elif isinstance(node, Compound):
        f.write(f"{_indent(depth)}Compound\n")
        for member in node.types:
            _dump_type(member, depth + 1, f)


def _dump_description(desc: Description, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}Description\n")
    for part in desc.parts:
        if isinstance(part, InlineTag):
            f.write(f"{_indent(depth + 1)}InlineTag @{part.name} {part.body!r}\n")
        else:
            f.write(f"{_indent(depth + 1)}Text({part!r})\n")
