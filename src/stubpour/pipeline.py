# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Pour a stub struct out of an interface declared in source."""

import logging
from dataclasses import replace

from stubpour.errors import InvalidArgumentError
from stubpour.frontend import SourceFrontend
from stubpour.frontends import GoFrontend
from stubpour.model import PourOptions, PourResult
from stubpour.resolver import resolve_interface
from stubpour.synthesizer import synthesize

logger = logging.getLogger(__name__)


def pour(
    source: bytes | str,
    interface_name: str,
    struct_name: str,
    options: PourOptions | None = None,
    frontend: SourceFrontend | None = None,
) -> PourResult:
    """Generate a struct and stub methods implementing an interface.

    Args:
        source: Source text containing the interface.
        interface_name: Interface to implement.
        struct_name: Name of the struct to generate.
        options: Synthesis options.
        frontend: Parser collaborator; defaults to the Go front-end.

    Returns:
        Struct declaration, stub methods and the source package name.

    Raises:
        InvalidArgumentError: If a required name is empty.
        ParseError: If the source cannot be parsed.
        NotFoundError: If the interface is not declared.
        NotAnInterfaceError: If the name is declared with another shape.
        UnresolvedEmbedError: If an embedded interface is unknown.
        CyclicEmbeddingError: If interfaces embed each other in a cycle.
        UnsupportedShapeError: If a type cannot be emitted in a stub.
    """
    if not interface_name:
        raise InvalidArgumentError("must provide interface name")
    if not struct_name:
        raise InvalidArgumentError("must provide struct name")

    tree = (frontend or GoFrontend()).parse(source)
    methods = resolve_interface(tree, interface_name)
    result = synthesize(methods, struct_name=struct_name, options=options)
    logger.info(
        "Poured struct (interface=%s struct=%s methods=%d)",
        interface_name,
        struct_name,
        len(result.methods),
    )
    return replace(result, package=tree.package)
