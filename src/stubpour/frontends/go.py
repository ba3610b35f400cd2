# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Go source front-end built on tree-sitter."""

import logging

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from stubpour.errors import ParseError
from stubpour.frontend import (
    ConstraintMember,
    DeclarationShape,
    EmbeddedReference,
    FieldGroup,
    InterfaceMember,
    MethodMember,
    SourceTree,
    TypeDeclaration,
    TypeRef,
    TypeShape,
)

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

_DEFAULT_ENCODING = "utf-8"

# tree-sitter uses 0-based rows and columns
_POSITION_OFFSET = 1

# Older grammar releases use the second spelling of each node type.
_METHOD_NODE_TYPES: set[str] = {"method_elem", "method_spec"}
_EMBED_NODE_TYPES: set[str] = {"type_elem", "interface_type_name"}
_CONSTRAINT_NODE_TYPES: set[str] = {"constraint_elem", "struct_elem"}
_NAME_NODE_TYPES: set[str] = {"type_identifier", "qualified_type"}
_PARAMETER_NODE_TYPES: set[str] = {
    "parameter_declaration",
    "variadic_parameter_declaration",
}

_TYPE_SHAPES: dict[str, TypeShape] = {
    "type_identifier": "name",
    "qualified_type": "qualified",
    "pointer_type": "pointer",
    "slice_type": "slice",
    "array_type": "array",
    "implicit_length_array_type": "array",
    "map_type": "map",
    "channel_type": "channel",
    "function_type": "function",
    "interface_type": "interface",
    "struct_type": "struct",
    "generic_type": "generic",
}

_DECLARATION_SHAPES: dict[str, DeclarationShape] = {
    "interface_type": "interface",
    "struct_type": "struct",
}


class GoFrontend:
    """Parse Go source into a source tree of top-level type declarations."""

    def parse(self, source: bytes | str) -> SourceTree:
        """Parse Go source text.

        Args:
            source: Go source as bytes, or text encoded as UTF-8.

        Returns:
            Package name and top-level type declarations in source order.

        Raises:
            ParseError: If the source has syntax errors or is not valid UTF-8.
        """
        data = source.encode(_DEFAULT_ENCODING) if isinstance(source, str) else source
        try:
            data.decode(_DEFAULT_ENCODING)
        except UnicodeDecodeError as exc:
            logger.warning("Source is not valid UTF-8 (error=%s)", exc)
            raise ParseError(f"source is not valid UTF-8: {exc}") from exc

        parser = Parser()
        parser.language = GO_LANGUAGE
        root = parser.parse(data).root_node
        if root.has_error:
            raise _syntax_error(root)

        reader = _NodeReader(data)
        package: str | None = None
        declarations: list[TypeDeclaration] = []
        for node in root.named_children:
            if node.type == "package_clause":
                package = reader.package_name(node)
            elif node.type == "type_declaration":
                declarations.extend(reader.type_declarations(node))

        logger.debug(
            "Parsed Go source (package=%s declarations=%d)",
            package,
            len(declarations),
        )
        return SourceTree(declarations=tuple(declarations), package=package)


class _NodeReader:
    """Convert tree-sitter nodes into source tree DTOs."""

    def __init__(self, data: bytes) -> None:
        self._data = data

    def text(self, node: Node) -> str:
        raw = self._data[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)
        return " ".join(raw.split())

    def package_name(self, node: Node) -> str | None:
        for child in node.named_children:
            if child.type == "package_identifier":
                return self.text(child)
        return None

    def type_declarations(self, node: Node) -> list[TypeDeclaration]:
        declarations: list[TypeDeclaration] = []
        for spec in node.named_children:
            if spec.type not in {"type_spec", "type_alias"}:
                continue
            name_node = spec.child_by_field_name("name")
            type_node = spec.child_by_field_name("type")
            if name_node is None or type_node is None:
                continue
            line = spec.start_point[0] + _POSITION_OFFSET
            if spec.type == "type_alias":
                shape: DeclarationShape = "alias"
            else:
                shape = _DECLARATION_SHAPES.get(type_node.type, "other")
            members = self.interface_members(type_node) if shape == "interface" else ()
            declarations.append(
                TypeDeclaration(
                    name=self.text(name_node),
                    shape=shape,
                    members=members,
                    line=line,
                )
            )
        return declarations

    def interface_members(self, node: Node) -> tuple[InterfaceMember, ...]:
        members: list[InterfaceMember] = []
        for child in node.named_children:
            if child.type == "comment":
                continue
            if child.type in _METHOD_NODE_TYPES:
                members.append(self.method_member(child))
            elif child.type in _NAME_NODE_TYPES:
                members.append(
                    EmbeddedReference(
                        name=self.text(child), shape=_TYPE_SHAPES[child.type]
                    )
                )
            elif child.type in _EMBED_NODE_TYPES:
                members.append(self.embedded_member(child))
            elif child.type in _CONSTRAINT_NODE_TYPES:
                members.append(ConstraintMember(text=self.text(child)))
            else:
                logger.debug(
                    "Ignoring interface member (type=%s text=%s)",
                    child.type,
                    self.text(child),
                )
        return tuple(members)

    def embedded_member(self, node: Node) -> InterfaceMember:
        named = [child for child in node.named_children if child.type != "comment"]
        if not named and node.type == "interface_type_name":
            return EmbeddedReference(name=self.text(node))
        # Only unions and ~T approximations are type-set elements; any other
        # single embedded type must resolve or fail.
        if len(named) == 1 and named[0].type != "negated_type":
            return EmbeddedReference(
                name=self.text(named[0]),
                shape=_TYPE_SHAPES.get(named[0].type, "other"),
            )
        return ConstraintMember(text=self.text(node))

    def method_member(self, node: Node) -> MethodMember:
        name_node = node.child_by_field_name("name")
        params_node = node.child_by_field_name("parameters")
        result_node = node.child_by_field_name("result")
        params = self.field_groups(params_node) if params_node is not None else ()
        if result_node is None:
            results: tuple[FieldGroup, ...] = ()
        elif result_node.type == "parameter_list":
            results = self.field_groups(result_node)
        else:
            results = (FieldGroup(names=(), type_ref=self.type_ref(result_node)),)
        return MethodMember(
            name=self.text(name_node) if name_node is not None else "",
            params=params,
            results=results,
        )

    def field_groups(self, node: Node) -> tuple[FieldGroup, ...]:
        groups: list[FieldGroup] = []
        for child in node.named_children:
            if child.type not in _PARAMETER_NODE_TYPES:
                continue
            names = tuple(
                self.text(name) for name in child.children_by_field_name("name")
            )
            type_node = child.child_by_field_name("type")
            if type_node is None:
                continue
            type_ref = self.type_ref(type_node)
            if child.type == "variadic_parameter_declaration":
                type_ref = TypeRef(text=f"...{type_ref.text}", shape="variadic")
            groups.append(FieldGroup(names=names, type_ref=type_ref))
        return tuple(groups)

    def type_ref(self, node: Node) -> TypeRef:
        if node.type == "parenthesized_type" and node.named_child_count == 1:
            return self.type_ref(node.named_children[0])
        return TypeRef(text=self.text(node), shape=_TYPE_SHAPES.get(node.type, "other"))


def _syntax_error(root: Node) -> ParseError:
    """Build a parse error pointing at the first erroneous node.

    Args:
        root: Root node of a tree that contains errors.

    Returns:
        Parse error with 1-based position of the offending node.
    """
    offending = _first_error_node(root) or root
    line = offending.start_point[0] + _POSITION_OFFSET
    column = offending.start_point[1] + _POSITION_OFFSET
    kind = "missing token" if offending.is_missing else "syntax error"
    logger.warning("Go source failed to parse (line=%d column=%d)", line, column)
    return ParseError(f"{kind} at line {line}, column {column}", line, column)


def _first_error_node(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error_node(child)
            if found is not None:
                return found
    return None
