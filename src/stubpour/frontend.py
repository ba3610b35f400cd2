# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Front-end contract and source tree DTOs consumed by the resolver."""

from dataclasses import dataclass
from typing import Literal, Protocol, Union


TypeShape = Literal[
    "name",
    "qualified",
    "pointer",
    "slice",
    "array",
    "map",
    "channel",
    "function",
    "interface",
    "struct",
    "generic",
    "variadic",
    "other",
]

DeclarationShape = Literal["interface", "struct", "alias", "other"]


@dataclass(frozen=True)
class TypeRef:
    """Represent one type expression as written in source.

    Attributes:
        text: Source text with whitespace runs collapsed.
        shape: Syntactic category of the expression.
    """

    text: str
    shape: TypeShape = "name"

    @property
    def is_simple_name(self) -> bool:
        """Return True for a bare, unqualified type identifier."""
        return self.shape == "name"


@dataclass(frozen=True)
class FieldGroup:
    """Represent one parameter or result field in source notation.

    ``a, b int`` is one group with two names; ``int`` is a group with none.
    """

    names: tuple[str, ...]
    type_ref: TypeRef


@dataclass(frozen=True)
class MethodMember:
    """Represent a method declared directly in an interface body."""

    name: str
    params: tuple[FieldGroup, ...] = ()
    results: tuple[FieldGroup, ...] = ()


@dataclass(frozen=True)
class EmbeddedReference:
    """Represent another interface embedded by name."""

    name: str
    shape: TypeShape = "name"


@dataclass(frozen=True)
class ConstraintMember:
    """Represent a type-set element such as ``~int | string``."""

    text: str


InterfaceMember = Union[MethodMember, EmbeddedReference, ConstraintMember]


@dataclass(frozen=True)
class TypeDeclaration:
    """Represent one top-level type declaration.

    Attributes:
        name: Declared type name.
        shape: Underlying declaration shape.
        members: Interface members in source order; empty for other shapes.
        line: Start line in source (1-based), 0 when unknown.
    """

    name: str
    shape: DeclarationShape
    members: tuple[InterfaceMember, ...] = ()
    line: int = 0


@dataclass(frozen=True)
class SourceTree:
    """Represent the declarations of one parsed source unit."""

    declarations: tuple[TypeDeclaration, ...]
    package: str | None = None


class SourceFrontend(Protocol):
    """Language front-end contract producing source trees."""

    def parse(self, source: bytes) -> SourceTree:
        """Parse raw source and return its type declarations.

        Raises:
            ParseError: If the source cannot be parsed.
        """
