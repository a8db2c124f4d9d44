"""Generate C assertion macros from their names."""

from assertgen.generator import GenerationResult, Generator
from assertgen.parser import parse

__all__ = ["GenerationResult", "Generator", "parse"]
