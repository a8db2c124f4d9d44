from __future__ import annotations

from dataclasses import dataclass, field

from assertgen.model import Macro
from assertgen.registry import DependencyRegistry
from assertgen.synthesis.base import render


@dataclass
class OutputAssembler:
    """Collects generated sections and joins them into one header."""

    guard: str = "ASSERTIONS_H"
    includes: list[str] = field(default_factory=list)
    comparators: list[Macro] = field(default_factory=list)
    assertions: list[Macro] = field(default_factory=list)

    def add_comparator(self, macro: Macro) -> None:
        self.comparators.append(macro)

    def add_assertion(self, macro: Macro) -> None:
        self.assertions.append(macro)

    def assemble(self, registry: DependencyRegistry) -> str:
        includes = list(dict.fromkeys([*self.includes, *registry.includes]))
        text = render(
            "header.h.j2",
            guard=self.guard,
            advisory=registry.advisory_lines(),
            includes=includes,
            comparators=[m.render() for m in self.comparators],
            assertions=[m.render() for m in self.assertions],
        )
        return text + "\n"
