# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for interface resolution and embedding expansion."""

import pytest

from stubpour import (
    AmbiguousDeclarationError,
    CyclicEmbeddingError,
    InterfaceResolver,
    InvalidArgumentError,
    NotAnInterfaceError,
    NotFoundError,
    UnresolvedEmbedError,
    resolve_interface,
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
from stubpour.frontends import GoFrontend
from stubpour.model import MethodSignature, Parameter, Result


def _interface(name: str, *members) -> TypeDeclaration:
    return TypeDeclaration(name=name, shape="interface", members=tuple(members))


def _tree(*declarations: TypeDeclaration) -> SourceTree:
    return SourceTree(declarations=tuple(declarations))


def test_res_001_direct_methods_keep_declaration_order() -> None:
    tree = _tree(
        _interface("I", MethodMember("C"), MethodMember("A"), MethodMember("B"))
    )

    methods = resolve_interface(tree, "I")

    assert [method.name for method in methods] == ["C", "A", "B"]


def test_res_002_embedded_methods_are_spliced_in_place() -> None:
    tree = _tree(
        _interface("J", MethodMember("J1"), MethodMember("J2")),
        _interface(
            "I", MethodMember("I1"), EmbeddedReference("J"), MethodMember("I2")
        ),
    )

    methods = resolve_interface(tree, "I")

    assert [method.name for method in methods] == ["I1", "J1", "J2", "I2"]


def test_res_003_nested_embedding_expands_recursively(go_source) -> None:
    source = go_source(
        "type I interface {",
        "\tJ",
        "\tC()",
        "}",
        "",
        "type J interface {",
        "\tK",
        "\tB()",
        "}",
        "",
        "type K interface {",
        "\tA()",
        "}",
    )
    tree = GoFrontend().parse(source)

    methods = resolve_interface(tree, "I")

    assert [method.name for method in methods] == ["A", "B", "C"]


def test_res_004_multi_name_fields_are_split() -> None:
    int_ref = TypeRef("int")
    tree = _tree(
        _interface(
            "I",
            MethodMember(
                "A",
                params=(FieldGroup(("someInt", "anotherInt"), int_ref),),
                results=(FieldGroup(("x", "y"), int_ref), FieldGroup((), int_ref)),
            ),
        )
    )

    (method,) = resolve_interface(tree, "I")

    assert method == MethodSignature(
        name="A",
        params=(Parameter("someInt", int_ref), Parameter("anotherInt", int_ref)),
        results=(Result("x", int_ref), Result("y", int_ref), Result(None, int_ref)),
    )


def test_res_005_missing_interface_raises_not_found() -> None:
    tree = _tree(_interface("I", MethodMember("A")))

    with pytest.raises(NotFoundError) as exc_info:
        resolve_interface(tree, "Missing")

    assert exc_info.value.name == "Missing"


def test_res_006_non_interface_declaration_raises_not_an_interface() -> None:
    tree = _tree(TypeDeclaration(name="S", shape="struct"))

    with pytest.raises(NotAnInterfaceError) as exc_info:
        resolve_interface(tree, "S")

    assert exc_info.value.shape == "struct"


def test_res_007_undeclared_embed_raises_unresolved_embed() -> None:
    tree = _tree(_interface("I", MethodMember("A"), EmbeddedReference("Nope")))

    with pytest.raises(UnresolvedEmbedError) as exc_info:
        resolve_interface(tree, "I")

    assert exc_info.value.name == "Nope"
    assert exc_info.value.interface_name == "I"


def test_res_008_embed_of_struct_or_other_package_is_unresolved() -> None:
    tree = _tree(
        TypeDeclaration(name="S", shape="struct"),
        _interface("I", EmbeddedReference("S")),
        _interface("Q", EmbeddedReference("io.Reader", shape="qualified")),
    )

    with pytest.raises(UnresolvedEmbedError):
        resolve_interface(tree, "I")
    with pytest.raises(UnresolvedEmbedError) as exc_info:
        resolve_interface(tree, "Q")

    assert exc_info.value.name == "io.Reader"


def test_res_009_self_embedding_raises_cyclic_embedding() -> None:
    tree = _tree(_interface("I", MethodMember("A"), EmbeddedReference("I")))

    with pytest.raises(CyclicEmbeddingError) as exc_info:
        resolve_interface(tree, "I")

    assert exc_info.value.path == ("I", "I")


def test_res_010_mutual_embedding_reports_cycle_path() -> None:
    tree = _tree(
        _interface("A", EmbeddedReference("B")),
        _interface("B", MethodMember("M"), EmbeddedReference("A")),
    )

    with pytest.raises(CyclicEmbeddingError) as exc_info:
        resolve_interface(tree, "A")

    assert exc_info.value.path == ("A", "B", "A")
    assert "A -> B -> A" in str(exc_info.value)


def test_res_011_diamond_embedding_keeps_duplicate_methods() -> None:
    tree = _tree(
        _interface("Base", MethodMember("Close")),
        _interface("R", EmbeddedReference("Base"), MethodMember("Read")),
        _interface("W", EmbeddedReference("Base"), MethodMember("Write")),
        _interface("RW", EmbeddedReference("R"), EmbeddedReference("W")),
    )

    methods = resolve_interface(tree, "RW")

    assert [method.name for method in methods] == [
        "Close",
        "Read",
        "Close",
        "Write",
    ]


def test_res_012_duplicate_declarations_are_ambiguous() -> None:
    tree = _tree(_interface("I", MethodMember("A")), _interface("I"))

    with pytest.raises(AmbiguousDeclarationError) as exc_info:
        resolve_interface(tree, "I")

    assert exc_info.value.count == 2


def test_res_013_empty_name_is_invalid() -> None:
    with pytest.raises(InvalidArgumentError):
        resolve_interface(_tree(), "")


def test_res_014_constraint_elements_are_skipped(caplog) -> None:
    tree = _tree(_interface("I", ConstraintMember("~int"), MethodMember("A")))

    with caplog.at_level("WARNING"):
        methods = resolve_interface(tree, "I")

    assert [method.name for method in methods] == ["A"]
    assert "Skipping type constraint element" in caplog.text


def test_res_015_find_returns_declaration_without_flattening() -> None:
    declaration = _interface("I", EmbeddedReference("Missing"))
    resolver = InterfaceResolver(_tree(declaration))

    assert resolver.find("I") is declaration
