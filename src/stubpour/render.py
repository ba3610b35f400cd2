# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Emit gofmt-style Go text for synthesized declarations."""

from stubpour.model import (
    Parameter,
    PourResult,
    Result,
    ReturnStmt,
    Statement,
    SynthesizedMethod,
    SynthesizedType,
    VarDecl,
)

_INDENT = "\t"


def render_go(result: PourResult, package: str | None = None) -> str:
    """Render a pour result as Go source text.

    Args:
        result: Synthesized struct and methods.
        package: Package clause override; falls back to ``result.package``.

    Returns:
        Go source text ending with a newline.
    """
    blocks: list[str] = []
    package_name = package or result.package
    if package_name:
        blocks.append(f"package {package_name}")
    blocks.append(render_type(result.struct))
    blocks.extend(render_method(method) for method in result.methods)
    return "\n\n".join(blocks) + "\n"


def render_type(struct: SynthesizedType) -> str:
    """Render ``type <name> struct{}``."""
    return f"type {struct.name} struct{{}}"


def render_method(method: SynthesizedMethod) -> str:
    """Render one stub method including its body."""
    receiver = method.receiver
    star = "*" if receiver.pointer else ""
    header = (
        f"func ({receiver.name} {star}{receiver.type_name}) "
        f"{method.name}({_render_params(method.params)})"
        f"{_render_results(method.results)}"
    )
    lines = [f"{header} {{"]
    lines.extend(f"{_INDENT}{_render_statement(stmt)}" for stmt in method.body)
    lines.append("}")
    return "\n".join(lines)


def _render_params(params: tuple[Parameter, ...]) -> str:
    return ", ".join(f"{param.name} {param.type_ref.text}" for param in params)


def _render_results(results: tuple[Result, ...]) -> str:
    if not results:
        return ""
    if len(results) == 1:
        return f" {results[0].type_ref.text}"
    return " (" + ", ".join(result.type_ref.text for result in results) + ")"


def _render_statement(statement: Statement) -> str:
    if isinstance(statement, VarDecl):
        return f"var {statement.name} {statement.type_ref.text}"
    if isinstance(statement, ReturnStmt):
        return "return " + ", ".join(statement.values)
    raise TypeError(f"unknown statement: {statement!r}")
