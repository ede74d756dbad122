"""Type resolver — converts type syntax into type-expression nodes."""

from __future__ import annotations

from paramdoc.errors import TypeSyntaxError
from paramdoc.typeexpr import (
    ArrayOf,
    ClassName,
    Compound,
    Context,
    Keyword,
    Nullable,
    TypeExpression,
)

KEYWORDS = frozenset(
    {
        "string",
        "int",
        "bool",
        "float",
        "array",
        "mixed",
        "null",
        "void",
        "callable",
        "iterable",
        "object",
        "resource",
        "self",
        "static",
        "parent",
        "$this",
        "true",
        "false",
        "never",
        "scalar",
    }
)

# Long spellings normalised to their canonical keyword
_KEYWORD_ALIASES = {
    "integer": "int",
    "boolean": "bool",
    "double": "float",
    "real": "float",
}


def is_ident_start(ch: str) -> bool:
    """Return True if ch may start a name segment."""
    return ch.isalpha() or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue a name segment."""
    return ch.isalnum() or ch == "_"


class TypeResolver:
    """Recursive descent resolver for type expressions.

    Stateless: one instance may be shared between callers and threads.
    """

    def resolve(self, token: str, context: Context | None = None) -> TypeExpression:
        """Resolve *token* against *context* into a type-expression node."""
        return _TypeParser(token, context or Context()).parse()


class _TypeParser:
    def __init__(self, source: str, context: Context) -> None:
        self._source = source
        self._context = context
        self._pos = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def _skip_ws(self) -> None:
        while self._peek().isspace():
            self._pos += 1

    def _at(self, ch: str) -> bool:
        self._skip_ws()
        return self._peek() == ch

    def _expect(self, ch: str) -> None:
        if not self._at(ch):
            raise self._error(f"expected '{ch}'")
        self._advance()

    def _error(self, message: str, offset: int | None = None) -> TypeSyntaxError:
        if offset is None:
            offset = self._pos
        return TypeSyntaxError(message, offset, self._source)

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse(self) -> TypeExpression:
        self._skip_ws()
        if not self._peek():
            raise self._error("empty type expression")
        result = self._parse_union()
        self._skip_ws()
        if self._peek():
            raise self._error(f"unexpected '{self._peek()}' in type expression")
        return result

    def _parse_union(self) -> TypeExpression:
        types = [self._parse_atom()]
        while self._at("|"):
            self._advance()
            types.append(self._parse_atom())
        if len(types) == 1:
            return types[0]
        return Compound(tuple(types))

    def _parse_atom(self) -> TypeExpression:
        if self._at("?"):
            self._advance()
            return Nullable(self._parse_atom())

        result = self._parse_primary()
        while self._at("["):
            self._advance()
            self._expect("]")
            result = ArrayOf(result)
        return result

    def _parse_primary(self) -> TypeExpression:
        self._skip_ws()
        ch = self._peek()

        if ch == "(":
            self._advance()
            inner = self._parse_union()
            self._expect(")")
            return inner

        if ch == "\\" or ch == "$" or is_ident_start(ch):
            name = self._read_name()
            if name.lower() == "array" and self._at("<"):
                return self._parse_generic_array()
            return self._resolve_name(name)

        if not ch:
            raise self._error("expected a type")
        raise self._error(f"unexpected '{ch}' in type expression")

    def _parse_generic_array(self) -> ArrayOf:
        self._expect("<")
        first = self._parse_union()
        if self._at(","):
            self._advance()
            value = self._parse_union()
            self._expect(">")
            return ArrayOf(value, key=first)
        self._expect(">")
        return ArrayOf(first)

    def _read_name(self) -> str:
        start = self._pos
        if self._peek() == "\\":
            self._advance()
        if self._peek() == "$":
            # Only $this is a valid name with a sigil
            self._advance()
        while True:
            if not is_ident_start(self._peek()):
                raise self._error("expected an identifier")
            while is_ident_char(self._peek()):
                self._advance()
            if self._peek() != "\\":
                break
            self._advance()
        name = self._source[start : self._pos]
        if name.startswith("$") and name != "$this":
            raise self._error(f"unexpected variable '{name}' in type expression", start)
        return name

    # ------------------------------------------------------------------
    # Name resolution
    # ------------------------------------------------------------------

    def _resolve_name(self, name: str) -> TypeExpression:
        if "\\" not in name:
            lowered = name.lower()
            if lowered in KEYWORDS:
                return Keyword(lowered)
            if lowered in _KEYWORD_ALIASES:
                return Keyword(_KEYWORD_ALIASES[lowered])

        if name.startswith("\\"):
            return ClassName(name[1:])

        head, sep, rest = name.partition("\\")
        for alias, target in self._context.aliases.items():
            if alias.lower() == head.lower():
                return ClassName(target + sep + rest)

        if self._context.namespace:
            return ClassName(f"{self._context.namespace}\\{name}")
        return ClassName(name)
