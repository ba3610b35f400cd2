# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Synthesize a concrete type and stub methods from a resolved method set."""

import logging

from stubpour.errors import InvalidArgumentError, UnsupportedShapeError
from stubpour.model import (
    MethodSignature,
    Parameter,
    PourOptions,
    PourResult,
    Receiver,
    ResolvedMethodSet,
    Result,
    ReturnStmt,
    Statement,
    SynthesizedMethod,
    SynthesizedType,
    VarDecl,
)

logger = logging.getLogger(__name__)

_PARAM_PREFIX = "arg"
_RESULT_PREFIX = "val"


class StubSynthesizer:
    """Build stub declarations bound to one new struct type."""

    def __init__(self, struct_name: str, options: PourOptions | None = None) -> None:
        """Initialize synthesizer state.

        Args:
            struct_name: Name of the struct to generate.
            options: Synthesis options; defaults rename every parameter.

        Raises:
            InvalidArgumentError: If the struct name is empty.
        """
        if not struct_name:
            raise InvalidArgumentError("must provide struct name")
        self._struct_name = struct_name
        self._options = options or PourOptions()
        self._receiver = Receiver(name=struct_name[0], type_name=struct_name)

    def synthesize_type(self) -> SynthesizedType:
        """Return the struct declaration with no fields."""
        return SynthesizedType(name=self._struct_name)

    def synthesize_method(self, signature: MethodSignature) -> SynthesizedMethod:
        """Build one stub method mirroring an interface method.

        Args:
            signature: Resolved method signature.

        Returns:
            Method with a pointer receiver, named parameters, unnamed results
            and a body returning zero values.

        Raises:
            UnsupportedShapeError: If a parameter or result type cannot be
                emitted.
        """
        params = self._params(signature)
        results, body = self._results_and_body(signature)
        return SynthesizedMethod(
            name=signature.name,
            receiver=self._receiver,
            params=params,
            results=results,
            body=body,
        )

    def _params(self, signature: MethodSignature) -> tuple[Parameter, ...]:
        params: list[Parameter] = []
        for index, param in enumerate(signature.params, start=1):
            if param.type_ref.shape == "other":
                logger.warning(
                    "Unsupported parameter type (method=%s index=%d type=%s)",
                    signature.name,
                    index,
                    param.type_ref.text,
                )
                raise UnsupportedShapeError(
                    signature.name, f"parameter {index}", param.type_ref.text
                )
            name = f"{_PARAM_PREFIX}{index}"
            if self._options.preserve_param_names and param.name:
                if param.name == self._receiver.name:
                    logger.warning(
                        "Parameter name shadows receiver, renaming "
                        "(method=%s name=%s replacement=%s)",
                        signature.name,
                        param.name,
                        name,
                    )
                else:
                    name = param.name
            params.append(Parameter(name=name, type_ref=param.type_ref))
        return tuple(params)

    def _results_and_body(
        self, signature: MethodSignature
    ) -> tuple[tuple[Result, ...], tuple[Statement, ...]]:
        """Build unnamed results and the zero-value body.

        Each result gets a ``val<K>`` local without initializer; the body ends
        with a return of those locals in order. A result type must be a bare
        type name so the local can be declared with it.
        """
        if not signature.results:
            return (), ()

        results: list[Result] = []
        statements: list[Statement] = []
        values: list[str] = []
        for index, result in enumerate(signature.results, start=1):
            if not result.type_ref.is_simple_name:
                logger.warning(
                    "Unsupported result type (method=%s index=%d type=%s)",
                    signature.name,
                    index,
                    result.type_ref.text,
                )
                raise UnsupportedShapeError(
                    signature.name, f"result {index}", result.type_ref.text
                )
            var_name = f"{_RESULT_PREFIX}{index}"
            results.append(Result(name=None, type_ref=result.type_ref))
            statements.append(VarDecl(name=var_name, type_ref=result.type_ref))
            values.append(var_name)

        statements.append(ReturnStmt(values=tuple(values)))
        return tuple(results), tuple(statements)


def synthesize(
    methods: ResolvedMethodSet,
    struct_name: str,
    options: PourOptions | None = None,
) -> PourResult:
    """Synthesize the struct and one stub per resolved method.

    Args:
        methods: Flat ordered method set.
        struct_name: Name of the struct to generate.
        options: Synthesis options.

    Returns:
        Struct declaration and stub methods in method-set order.
    """
    synthesizer = StubSynthesizer(struct_name=struct_name, options=options)
    return PourResult(
        struct=synthesizer.synthesize_type(),
        methods=tuple(synthesizer.synthesize_method(method) for method in methods),
    )
