# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for the interface stub generator."""

from stubpour.errors import (
    AmbiguousDeclarationError,
    CyclicEmbeddingError,
    InvalidArgumentError,
    NotAnInterfaceError,
    NotFoundError,
    ParseError,
    PourError,
    UnresolvedEmbedError,
    UnsupportedShapeError,
)
from stubpour.model import PourOptions, PourResult
from stubpour.pipeline import pour
from stubpour.render import render_go
from stubpour.resolver import InterfaceResolver, resolve_interface
from stubpour.synthesizer import StubSynthesizer, synthesize

__all__ = [
    "AmbiguousDeclarationError",
    "CyclicEmbeddingError",
    "InterfaceResolver",
    "InvalidArgumentError",
    "NotAnInterfaceError",
    "NotFoundError",
    "ParseError",
    "PourError",
    "PourOptions",
    "PourResult",
    "StubSynthesizer",
    "UnresolvedEmbedError",
    "UnsupportedShapeError",
    "pour",
    "render_go",
    "resolve_interface",
    "synthesize",
]
