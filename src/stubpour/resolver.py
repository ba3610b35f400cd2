# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Resolve interface declarations into flat, ordered method sets."""

import logging

from stubpour.errors import (
    AmbiguousDeclarationError,
    CyclicEmbeddingError,
    InvalidArgumentError,
    NotAnInterfaceError,
    NotFoundError,
    UnresolvedEmbedError,
)
from stubpour.frontend import (
    ConstraintMember,
    EmbeddedReference,
    FieldGroup,
    MethodMember,
    SourceTree,
    TypeDeclaration,
    TypeRef,
)
from stubpour.model import MethodSignature, Parameter, ResolvedMethodSet, Result

logger = logging.getLogger(__name__)


class InterfaceResolver:
    """Look up interfaces by name and flatten their embedded members."""

    def __init__(self, tree: SourceTree) -> None:
        """Index the top-level declarations of one source tree.

        Args:
            tree: Parsed source tree; never mutated.
        """
        self._declarations: dict[str, list[TypeDeclaration]] = {}
        for declaration in tree.declarations:
            self._declarations.setdefault(declaration.name, []).append(declaration)

    def find(self, interface_name: str) -> TypeDeclaration:
        """Return the single interface declaration with the given name.

        Args:
            interface_name: Name of the interface to look up.

        Returns:
            The matching interface declaration.

        Raises:
            InvalidArgumentError: If the name is empty.
            NotFoundError: If no declaration has that name.
            AmbiguousDeclarationError: If several declarations have that name.
            NotAnInterfaceError: If the declaration is not an interface.
        """
        if not interface_name:
            raise InvalidArgumentError("must provide interface name")
        matches = self._declarations.get(interface_name, [])
        if not matches:
            logger.warning("Interface not found (name=%s)", interface_name)
            raise NotFoundError(interface_name)
        if len(matches) > 1:
            logger.warning(
                "Interface name is ambiguous (name=%s count=%d)",
                interface_name,
                len(matches),
            )
            raise AmbiguousDeclarationError(interface_name, len(matches))
        declaration = matches[0]
        if declaration.shape != "interface":
            logger.warning(
                "Declaration is not an interface (name=%s shape=%s)",
                interface_name,
                declaration.shape,
            )
            raise NotAnInterfaceError(interface_name, declaration.shape)
        return declaration

    def resolve(self, interface_name: str) -> ResolvedMethodSet:
        """Flatten an interface into its full ordered method set.

        Embedded interfaces are expanded in place, in their own declared
        order. Method names are not deduplicated.

        Args:
            interface_name: Name of the interface to resolve.

        Returns:
            Method signatures in declaration order.

        Raises:
            UnresolvedEmbedError: If an embedded name is not a known interface.
            CyclicEmbeddingError: If embedding leads back to an interface
                already being resolved.
        """
        declaration = self.find(interface_name)
        methods = self._flatten(declaration, path=(declaration.name,))
        logger.debug(
            "Resolved interface (name=%s methods=%d)", interface_name, len(methods)
        )
        return tuple(methods)

    def _flatten(
        self, declaration: TypeDeclaration, path: tuple[str, ...]
    ) -> list[MethodSignature]:
        methods: list[MethodSignature] = []
        for member in declaration.members:
            if isinstance(member, MethodMember):
                methods.append(_split_method(member))
            elif isinstance(member, EmbeddedReference):
                embedded = self._embedded(member, declaration.name)
                if embedded.name in path:
                    cycle = path + (embedded.name,)
                    logger.warning("Cyclic embedding detected (path=%s)", cycle)
                    raise CyclicEmbeddingError(cycle)
                methods.extend(self._flatten(embedded, path=path + (embedded.name,)))
            elif isinstance(member, ConstraintMember):
                logger.warning(
                    "Skipping type constraint element (interface=%s element=%s)",
                    declaration.name,
                    member.text,
                )
        return methods

    def _embedded(
        self, reference: EmbeddedReference, interface_name: str
    ) -> TypeDeclaration:
        matches = self._declarations.get(reference.name, [])
        if len(matches) > 1:
            raise AmbiguousDeclarationError(reference.name, len(matches))
        if (
            reference.shape != "name"
            or not matches
            or matches[0].shape != "interface"
        ):
            logger.warning(
                "Embedded interface could not be resolved (name=%s interface=%s)",
                reference.name,
                interface_name,
            )
            raise UnresolvedEmbedError(reference.name, interface_name)
        return matches[0]


def resolve_interface(tree: SourceTree, interface_name: str) -> ResolvedMethodSet:
    """Resolve one named interface of a source tree.

    Args:
        tree: Parsed source tree.
        interface_name: Interface to resolve.

    Returns:
        Flat ordered method set.
    """
    return InterfaceResolver(tree).resolve(interface_name)


def _split_method(member: MethodMember) -> MethodSignature:
    """Split multi-name field groups so each entry has at most one name."""
    return MethodSignature(
        name=member.name,
        params=tuple(
            Parameter(name=name, type_ref=type_ref)
            for name, type_ref in _split_groups(member.params)
        ),
        results=tuple(
            Result(name=name, type_ref=type_ref)
            for name, type_ref in _split_groups(member.results)
        ),
    )


def _split_groups(
    groups: tuple[FieldGroup, ...],
) -> list[tuple[str | None, TypeRef]]:
    fields: list[tuple[str | None, TypeRef]] = []
    for group in groups:
        if not group.names:
            fields.append((None, group.type_ref))
            continue
        for name in group.names:
            fields.append((name, group.type_ref))
    return fields
