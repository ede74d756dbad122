"""Lexical context and type-expression nodes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Context:
    """Namespace and aliases used to resolve relative class names."""

    namespace: str = ""
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespace", self.namespace.strip("\\"))
        object.__setattr__(
            self, "aliases", {k: v.strip("\\") for k, v in self.aliases.items()}
        )


@dataclass(frozen=True, slots=True)
class Keyword:
    """Built-in pseudo type: string, int, mixed, ..."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ClassName:
    """Fully-qualified class reference, stored without the leading backslash."""

    fqsen: str

    def __str__(self) -> str:
        return "\\" + self.fqsen


@dataclass(frozen=True, slots=True)
class ArrayOf:
    """Array of *value*, optionally keyed by *key*."""

    value: TypeExpression
    key: TypeExpression | None = None

    def __str__(self) -> str:
        if self.key is not None:
            return f"array<{self.key},{self.value}>"
        if isinstance(self.value, (Compound, Nullable)):
            return f"({self.value})[]"
        return f"{self.value}[]"


@dataclass(frozen=True, slots=True)
class Nullable:
    """``?T`` — *inner* or null."""

    inner: TypeExpression

    def __str__(self) -> str:
        # ? binds tighter than |
        if isinstance(self.inner, Compound):
            return f"?({self.inner})"
        return f"?{self.inner}"


@dataclass(frozen=True, slots=True)
class Compound:
    """Union of two or more alternatives."""

    types: tuple[TypeExpression, ...]

    def __str__(self) -> str:
        return "|".join(str(t) for t in self.types)


TypeExpression = Keyword | ClassName | ArrayOf | Nullable | Compound
