"""Turn decoded assertion specs into macro definitions."""

from __future__ import annotations

import logging

from assertgen.config import GeneratorConfig
from assertgen.model import (
    AssertionSpec,
    Boolean,
    Identity,
    LiteralEquality,
    Macro,
    NullCheck,
    Relational,
    ResultStatus,
    TruthValue,
    Unrecognized,
)
from assertgen.registry import DependencyRegistry
from assertgen.synthesis.base import (
    VARIADIC_DOC,
    VARIADIC_PARAM,
    c_string,
    doc_comment,
    render,
    stringify_message,
)

_SINGLE_PARAM_DOC = "expression to test"
_PAIR_PARAM_DOCS = ("first value to compare", "second value to compare")


def _negate(expression: str) -> str:
    return f"!({expression})"


class MacroSynthesizer:
    """Renders assertion macros and records their effects on the registry."""

    def __init__(
        self,
        registry: DependencyRegistry,
        config: GeneratorConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.registry = registry
        self.config = config or GeneratorConfig()
        self.logger = logger or logging.getLogger(__name__)

    def expression(self, spec: AssertionSpec) -> str:
        """Build the C boolean expression that must hold for the test to pass."""
        condition = spec.condition
        eq = "!=" if spec.negated else "=="

        if isinstance(condition, NullCheck):
            self.registry.require_include(self.config.null_header)
            return f"({spec.args[0]}) {eq} NULL"
        if isinstance(condition, LiteralEquality):
            return f"({spec.args[0]}) {eq} {condition.value}"
        if isinstance(condition, Identity):
            return f"({spec.args[0]}) {eq} ({spec.args[1]})"

        if isinstance(condition, (Boolean, TruthValue)):
            test = f"({spec.args[0]})"
        elif isinstance(condition, ResultStatus):
            test = self.config.failure_test.replace("{expr}", spec.args[0])
        elif isinstance(condition, Relational):
            comparator = f"{spec.type_tag}_compare"
            self.registry.require(comparator)
            a, b = spec.args
            test = f"({comparator}({a}, {b}) {condition.op.symbol} 0)"
        else:
            raise ValueError(f"Unknown condition kind: {condition!r}")

        return _negate(test) if spec.invert else test

    def _param_docs(self, spec: AssertionSpec) -> list[tuple[str, str]]:
        if len(spec.args) == 1:
            params = [(spec.args[0], _SINGLE_PARAM_DOC)]
        else:
            params = list(zip(spec.args, _PAIR_PARAM_DOCS))
        params.append((VARIADIC_PARAM, VARIADIC_DOC))
        return params

    def synthesize(self, spec: AssertionSpec) -> Macro:
        expression = self.expression(spec)
        doc = doc_comment(spec.doc, self._param_docs(spec), self.config.wrap_width)
        text = render(
            "assertion.h.j2",
            name=spec.name,
            params=[*spec.args, VARIADIC_PARAM],
            report_function=self.config.report_function,
            expression=expression,
            message=stringify_message(spec.message, spec.args),
        )
        self.registry.define(spec.name)
        self.logger.debug(f"Synthesized {spec.name}: {expression}")
        return Macro(name=spec.name, doc=doc, text=text)

    def placeholder(self, result: Unrecognized) -> Macro:
        """Stand-in that breaks the build only where the bad name is used."""
        diagnostic = f"{result.token}: {result.reason}"
        text = render(
            "placeholder.h.j2",
            token=result.token,
            reason=result.reason,
            diagnostic=c_string(diagnostic),
        )
        self.registry.define(result.token)
        return Macro(name=result.token, doc="", text=text)
