"""@param tag parser — splits a tag body into type, variable and description."""

from __future__ import annotations

from typing import Protocol

from paramdoc.ast import Param
from paramdoc.description import Description
from paramdoc.errors import InvalidArgument
from paramdoc.tokens import SIGIL, VARIADIC, is_variable_token, split_fragments
from paramdoc.typeexpr import Context, TypeExpression


class TypeResolverLike(Protocol):
    def resolve(self, token: str, context: Context | None) -> TypeExpression: ...


class DescriptionFactoryLike(Protocol):
    def create(self, text: str, context: Context | None) -> Description: ...


def parse_param(
    body: str,
    type_resolver: TypeResolverLike | None,
    description_factory: DescriptionFactoryLike | None,
    context: Context | None = None,
) -> Param:
    """Parse the body of a ``@param`` tag.

    Fields are classified by position only:

    1. A first fragment not starting with ``$`` is the type token.
    2. A next fragment starting with ``$`` or ``...$`` is the variable token.
    3. Everything after that, whitespace included, is the description.

    So ``"description only"`` yields the type ``description``. Errors raised
    by the collaborators propagate unchanged.
    """
    if not body.strip():
        raise InvalidArgument("tag body must not be empty")
    if type_resolver is None:
        raise InvalidArgument("type resolver required")
    if description_factory is None:
        raise InvalidArgument("description factory required")

    parts = split_fragments(body)
    declared_type: TypeExpression | None = None
    variable_name: str | None = None
    is_variadic = False

    # If the first fragment is not a variable, it is a type
    if parts and parts[0] and not parts[0].startswith(SIGIL):
        declared_type = type_resolver.resolve(parts.pop(0), context)
        _drop_separator(parts)

    if parts and parts[0] and is_variable_token(parts[0]):
        variable_name = parts.pop(0)
        _drop_separator(parts)

        # Variadic marker first, then the sigil
        if variable_name.startswith(VARIADIC):
            is_variadic = True
            variable_name = variable_name[len(VARIADIC) :]
        if variable_name.startswith(SIGIL):
            variable_name = variable_name[len(SIGIL) :]

    description = description_factory.create("".join(parts), context)

    return Param(variable_name, declared_type, is_variadic, description)


def _drop_separator(parts: list[str]) -> None:
    if parts:
        parts.pop(0)
