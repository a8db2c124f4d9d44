"""Typed three-way comparator macros used by relational assertions."""

from __future__ import annotations

import logging

from assertgen.config import GeneratorConfig
from assertgen.model import CompareSpec, Macro
from assertgen.registry import DependencyRegistry
from assertgen.synthesis.base import doc_comment, render

BYTEWISE_CAVEAT = (
    "Warning: the bytes of the two operands are compared directly. This is "
    "unsound for structures with padding or pointer members; "
    "such types need a hand-written {name}."
)


def _bands(scalar: bool) -> list[str]:
    if scalar:
        subject, verb, other = "a", "is", "b"
    else:
        subject, verb, other = "the bytes of a", "are", "those of b"
    return [
        f">0 if {subject} {verb} greater than {other}",
        f" 0 if {subject} {verb} equal to {other}",
        f"<0 if {subject} {verb} less than {other}",
    ]


class CompareSynthesizer:
    def __init__(
        self,
        registry: DependencyRegistry,
        config: GeneratorConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.registry = registry
        self.config = config or GeneratorConfig()
        self.logger = logger or logging.getLogger(__name__)

    def expression(self, spec: CompareSpec) -> str:
        if spec.type_tag == "Number":
            return "((a) - (b))"
        self.registry.require_include(self.config.string_header)
        if spec.type_tag == "String":
            return "strcmp((a), (b))"
        return f"memcmp(&(a), &(b), sizeof({spec.type_tag}))"

    def synthesize(self, spec: CompareSpec) -> Macro:
        expression = self.expression(spec)
        scalar = spec.type_tag in ("Number", "String")

        if scalar:
            summary = f"Compares two {spec.type_tag} values."
            notes = []
        else:
            summary = f"Compares two {spec.type_tag} values byte by byte."
            notes = [BYTEWISE_CAVEAT.format(name=spec.name)]

        doc = doc_comment(
            summary,
            [
                ("a", f"first {spec.type_tag} value"),
                ("b", f"second {spec.type_tag} value"),
            ],
            self.config.wrap_width,
            notes=notes,
            returns=_bands(scalar),
        )
        text = render("compare.h.j2", name=spec.name, expression=expression)

        self.registry.define(spec.name)
        self.logger.debug(f"Synthesized comparator {spec.name}: {expression}")
        return Macro(name=spec.name, doc=doc, text=text)
