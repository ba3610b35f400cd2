# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Error taxonomy for interface resolution and stub synthesis."""


class PourError(RuntimeError):
    """Represent any failure of one pour operation."""


class InvalidArgumentError(PourError):
    """Represent a required argument that is missing or empty."""


class ParseError(PourError):
    """Represent a front-end failure to build a source tree.

    Args:
        message: Front-end error detail.
        line: 1-based line of the first offending node, when known.
        column: 1-based column of the first offending node, when known.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


class NotFoundError(PourError):
    """Represent a missing declaration for the requested interface name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"could not find interface: {name}")
        self.name = name


class NotAnInterfaceError(PourError):
    """Represent a declaration whose shape is not an interface."""

    def __init__(self, name: str, shape: str) -> None:
        super().__init__(f"declaration {name} is a {shape}, not an interface")
        self.name = name
        self.shape = shape


class AmbiguousDeclarationError(PourError):
    """Represent a name declared more than once at the top level."""

    def __init__(self, name: str, count: int) -> None:
        super().__init__(f"name {name} is declared {count} times")
        self.name = name
        self.count = count


class UnresolvedEmbedError(PourError):
    """Represent an embedded reference with no matching interface."""

    def __init__(self, name: str, interface_name: str) -> None:
        super().__init__(
            f"interface {interface_name} embeds {name}, which is not a known interface"
        )
        self.name = name
        self.interface_name = interface_name


class CyclicEmbeddingError(PourError):
    """Represent an embedding chain that leads back to itself.

    Args:
        path: Interface names from the outermost interface to the repeated one.
    """

    def __init__(self, path: tuple[str, ...]) -> None:
        super().__init__(f"cyclic interface embedding: {' -> '.join(path)}")
        self.path = path


class UnsupportedShapeError(PourError):
    """Represent a parameter or result type the synthesizer cannot emit."""

    def __init__(self, method_name: str, position: str, type_text: str) -> None:
        super().__init__(
            f"method {method_name}: {position} has unsupported type {type_text}"
        )
        self.method_name = method_name
        self.position = position
        self.type_text = type_text
