"""Macro synthesis for assertion and comparator specs."""

from assertgen.synthesis.assertion import MacroSynthesizer
from assertgen.synthesis.compare import CompareSynthesizer

__all__ = ["CompareSynthesizer", "MacroSynthesizer"]
