# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for resolved method sets and synthesized declarations."""

from dataclasses import dataclass
from typing import Union

from stubpour.frontend import TypeRef


@dataclass(frozen=True)
class Parameter:
    """Represent one method parameter with at most one name."""

    name: str | None
    type_ref: TypeRef


@dataclass(frozen=True)
class Result:
    """Represent one method result with at most one name."""

    name: str | None
    type_ref: TypeRef


@dataclass(frozen=True)
class MethodSignature:
    """Represent one flattened interface method.

    Attributes:
        name: Method name.
        params: Parameters in order, one entry per source name.
        results: Results in order, one entry per source name.
    """

    name: str
    params: tuple[Parameter, ...] = ()
    results: tuple[Result, ...] = ()


ResolvedMethodSet = tuple[MethodSignature, ...]


@dataclass(frozen=True)
class PourOptions:
    """Options controlling stub synthesis.

    Attributes:
        preserve_param_names: Keep source parameter names where present.
    """

    preserve_param_names: bool = False


@dataclass(frozen=True)
class SynthesizedType:
    """Represent the new concrete type; always a struct with no fields."""

    name: str
    fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class Receiver:
    """Represent a method receiver bound to the synthesized type."""

    name: str
    type_name: str
    pointer: bool = True


@dataclass(frozen=True)
class VarDecl:
    """Represent ``var <name> <type>`` with no initializer."""

    name: str
    type_ref: TypeRef


@dataclass(frozen=True)
class ReturnStmt:
    """Represent ``return <values...>`` yielding locals by name."""

    values: tuple[str, ...]


Statement = Union[VarDecl, ReturnStmt]


@dataclass(frozen=True)
class SynthesizedMethod:
    """Represent one stub method bound to the synthesized type.

    Attributes:
        name: Method name.
        receiver: Pointer receiver shared by every method.
        params: Named parameters.
        results: Unnamed results.
        body: Variable declarations followed by one return, or empty.
    """

    name: str
    receiver: Receiver
    params: tuple[Parameter, ...]
    results: tuple[Result, ...]
    body: tuple[Statement, ...]


@dataclass(frozen=True)
class PourResult:
    """Represent the output of one pour operation."""

    struct: SynthesizedType
    methods: tuple[SynthesizedMethod, ...]
    package: str | None = None
