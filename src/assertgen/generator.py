from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Iterator

from assertgen.assembler import OutputAssembler
from assertgen.config import GeneratorConfig
from assertgen.model import AssertionSpec, CompareSpec, Unrecognized
from assertgen.parser import ParseResult, parse
from assertgen.registry import DependencyRegistry
from assertgen.synthesis import CompareSynthesizer, MacroSynthesizer

_CANDIDATE_RE = re.compile(
    r"(?:Assert|Fail)[A-Za-z0-9_]*|[A-Za-z_][A-Za-z0-9_]*_compare"
)
_SCAN_RE = re.compile(
    r"\b(?:(?:Assert|Fail_if|Fail_unless)[A-Za-z0-9_]*|[A-Za-z_][A-Za-z0-9_]*_compare)\b"
)


def is_candidate(token: str) -> bool:
    """Whether a token has the shape of an assertion or comparator name."""
    return _CANDIDATE_RE.fullmatch(token) is not None


def read_tokens(lines: Iterable[str], scan: bool = False) -> Iterator[str]:
    """Yield candidate tokens from input lines.

    By default each line holds one token and anything else is skipped. With
    ``scan`` every assertion or comparator name found anywhere in the text
    is yielded, which lets C test sources be fed in directly. Scanning only
    accepts the exact assertion prefixes so words like "Failure" in comments
    are not picked up.
    """
    for line in lines:
        if scan:
            yield from _SCAN_RE.findall(line)
            continue
        token = line.strip()
        if token and is_candidate(token):
            yield token


@dataclass
class GenerationResult:
    text: str
    assertions: int = 0
    comparators: int = 0
    diagnostics: list[str] = field(default_factory=list)
    unresolved: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Generator:
    """Runs the token -> header pipeline.

    Each ``run`` starts from a fresh registry so repeated runs over the same
    tokens produce identical output.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        logger: logging.Logger | None = None,
    ):
        self.config = config or GeneratorConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.reset()

    def reset(self) -> None:
        self.registry = DependencyRegistry(
            builtin_types=self.config.builtin_types, logger=self.logger
        )
        self.assertion_synth = MacroSynthesizer(
            self.registry, self.config, logger=self.logger
        )
        self.compare_synth = CompareSynthesizer(
            self.registry, self.config, logger=self.logger
        )
        self.assembler = OutputAssembler(
            guard=self.config.guard, includes=list(self.config.includes)
        )
        self.diagnostics: list[str] = []

    def feed(self, token: str) -> ParseResult | None:
        """Process one token. Returns the parse result, or None if skipped."""
        if self.registry.is_defined(token):
            self.logger.debug(f"Skipping duplicate {token}")
            return None

        result = parse(token)
        if isinstance(result, CompareSpec):
            self.assembler.add_comparator(self.compare_synth.synthesize(result))
        elif isinstance(result, AssertionSpec):
            self.assembler.add_assertion(self.assertion_synth.synthesize(result))
        elif isinstance(result, Unrecognized):
            self.logger.warning(f"Unrecognized token {token}: {result.reason}")
            self.diagnostics.append(token)
            self.assembler.add_assertion(self.assertion_synth.placeholder(result))
        return result

    def finish(self) -> GenerationResult:
        for macro in self.registry.resolve_builtins(self.compare_synth):
            self.assembler.add_comparator(macro)

        unresolved = self.registry.unresolved()
        for name in unresolved:
            self.logger.debug(f"Unresolved dependency {name}")

        return GenerationResult(
            text=self.assembler.assemble(self.registry),
            assertions=len(self.assembler.assertions) - len(self.diagnostics),
            comparators=len(self.assembler.comparators),
            diagnostics=list(self.diagnostics),
            unresolved=unresolved,
        )

    def run(self, tokens: Iterable[str]) -> GenerationResult:
        self.reset()
        for token in tokens:
            self.feed(token)
        return self.finish()
