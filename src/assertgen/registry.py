"""Per-run bookkeeping of emitted macros, required comparators and includes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from assertgen.model import CompareSpec, Macro

if TYPE_CHECKING:
    from assertgen.synthesis.compare import CompareSynthesizer

COMPARE_SUFFIX = "_compare"


class DependencyRegistry:
    """Tracks what one generation run has defined and still needs.

    All three tables are dicts used as insertion-ordered sets, so every
    listing follows first-seen order regardless of hashing.
    """

    def __init__(
        self,
        builtin_types: list[str] | tuple[str, ...] = ("Number", "String"),
        logger: logging.Logger | None = None,
    ):
        self.builtin_types = tuple(builtin_types)
        self.logger = logger or logging.getLogger(__name__)
        self._needed: dict[str, None] = {}
        self._includes: dict[str, None] = {}
        self._defined: dict[str, None] = {}

    @property
    def needed(self) -> list[str]:
        return list(self._needed)

    @property
    def includes(self) -> list[str]:
        return list(self._includes)

    @property
    def defined(self) -> list[str]:
        return list(self._defined)

    def is_defined(self, name: str) -> bool:
        return name in self._defined

    def require(self, name: str) -> None:
        if name not in self._defined:
            self._needed.setdefault(name, None)

    def define(self, name: str) -> None:
        self._defined.setdefault(name, None)
        self._needed.pop(name, None)

    def require_include(self, header: str) -> None:
        self._includes.setdefault(header, None)

    def resolve_builtins(self, synthesizer: CompareSynthesizer) -> list[Macro]:
        """Generate comparators for needed builtin types.

        Returns the new macros in the order their need was first recorded.
        """
        resolved: list[Macro] = []
        for name in list(self._needed):
            type_tag = name.removesuffix(COMPARE_SUFFIX)
            if name == type_tag or type_tag not in self.builtin_types:
                continue
            if self.is_defined(name):
                continue
            self.logger.debug(f"Resolving builtin comparator {name}")
            resolved.append(synthesizer.synthesize(CompareSpec(type_tag)))
        return resolved

    def unresolved(self) -> list[str]:
        return [name for name in self._needed if name not in self._defined]

    def advisory_lines(self) -> list[str]:
        """One line per unresolved dependency, as the signature to provide."""
        lines = []
        for name in self.unresolved():
            type_tag = name.removesuffix(COMPARE_SUFFIX)
            if name == type_tag or not type_tag:
                lines.append(name)
            else:
                lines.append(f"int {name}({type_tag} a, {type_tag} b)")
        return lines
