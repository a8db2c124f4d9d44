"""Data model shared by the parser, synthesizers and registry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_TYPE = "Number"


class Polarity(str, Enum):
    ASSERT = "assert"
    ASSERT_NOT = "assert_not"
    FAIL_IF = "fail_if"
    FAIL_UNLESS = "fail_unless"

    @property
    def inverts(self) -> bool:
        return self in (Polarity.ASSERT_NOT, Polarity.FAIL_IF)


class RelOp(str, Enum):
    LT = "LT"
    LE = "LE"
    EQ = "EQ"
    GE = "GE"
    GT = "GT"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def phrase(self) -> str:
        return _PHRASES[self]


_SYMBOLS = {
    RelOp.LT: "<",
    RelOp.LE: "<=",
    RelOp.EQ: "==",
    RelOp.GE: ">=",
    RelOp.GT: ">",
}

_PHRASES = {
    RelOp.LT: "less than",
    RelOp.LE: "less than or equal to",
    RelOp.EQ: "equal to",
    RelOp.GE: "greater than or equal to",
    RelOp.GT: "greater than",
}


# Condition kinds. Each variant knows its argument names and how to phrase
# the tested clause; templates reference arguments by position (``{0}``).


@dataclass(frozen=True)
class Boolean:
    kind = "boolean"

    def args(self, type_tag: str) -> tuple[str, ...]:
        return ("expr",)

    def clause(self, negated: bool) -> str:
        return "{0} is false" if negated else "{0} is true"

    def failure(self, negated: bool) -> str:
        if negated:
            return "Negative assertion '{0}' failed"
        return "Assertion '{0}' failed"


@dataclass(frozen=True)
class ResultStatus:
    """Baseline test is "the operation failed"."""

    kind = "result_status"

    def args(self, type_tag: str) -> tuple[str, ...]:
        return ("expr",)

    def clause(self, negated: bool) -> str:
        return "{0} succeeded" if negated else "{0} failed"

    def failure(self, negated: bool) -> str:
        return "'{0}' failed" if negated else "'{0}' did not fail"


@dataclass(frozen=True)
class TruthValue:
    kind = "truth_value"

    def args(self, type_tag: str) -> tuple[str, ...]:
        return ("expr",)

    def clause(self, negated: bool) -> str:
        return "{0} is false" if negated else "{0} is true"

    def failure(self, negated: bool) -> str:
        return "'{0}' is true" if negated else "'{0}' is false"


@dataclass(frozen=True)
class NullCheck:
    kind = "null_check"

    def args(self, type_tag: str) -> tuple[str, ...]:
        return ("expr",)

    def clause(self, negated: bool) -> str:
        return "{0} is not NULL" if negated else "{0} is NULL"

    def failure(self, negated: bool) -> str:
        return "'{0}' is NULL" if negated else "'{0}' is not NULL"


@dataclass(frozen=True)
class LiteralEquality:
    value: int
    literal: str = ""

    kind = "literal_equality"

    def args(self, type_tag: str) -> tuple[str, ...]:
        return ("expr",)

    def clause(self, negated: bool) -> str:
        if negated:
            return f"{{0}} is not equal to {self.value}"
        return f"{{0}} is equal to {self.value}"

    def failure(self, negated: bool) -> str:
        if negated:
            return f"'{{0}}' is equal to {self.value}"
        return f"'{{0}}' is not equal to {self.value}"


@dataclass(frozen=True)
class Relational:
    op: RelOp

    kind = "relational"

    def args(self, type_tag: str) -> tuple[str, ...]:
        return (f"{type_tag}1", f"{type_tag}2")

    def clause(self, negated: bool) -> str:
        a, b = "{0}", "{1}"
        if negated:
            return f"{a} is not {self.op.phrase} {b}"
        return f"{a} is {self.op.phrase} {b}"

    def failure(self, negated: bool) -> str:
        a, b = "'{0}'", "'{1}'"
        if negated:
            return f"{a} is {self.op.phrase} {b}"
        return f"{a} is not {self.op.phrase} {b}"


@dataclass(frozen=True)
class Identity:
    kind = "identity"

    def args(self, type_tag: str) -> tuple[str, ...]:
        return ("arg1", "arg2")

    def clause(self, negated: bool) -> str:
        if negated:
            return "{0} is not the same as {1}"
        return "{0} is the same as {1}"

    def failure(self, negated: bool) -> str:
        if negated:
            return "'{0}' is the same as '{1}'"
        return "'{0}' is not the same as '{1}'"


Condition = (
    Boolean
    | ResultStatus
    | TruthValue
    | NullCheck
    | LiteralEquality
    | Relational
    | Identity
)


@dataclass
class AssertionSpec:
    """Decoded assertion token.

    Attributes:
        name: The token, used verbatim as the macro name.
        polarity: Which prefix the token carried.
        condition: The condition kind variant.
        invert: Whether the positive test is negated in the final expression.
            Kinds that fold negation into their operator (null check, literal
            equality, identity) carry the negation in ``negated`` and keep
            ``invert`` false.
        negated: Whether the pass condition is the negated clause. Drives the
            doc sentence and the failure message.
        type_tag: Operand type for relational kinds, empty otherwise.
        args: Macro parameter names, determined by the condition kind.
        message: Failure message template with positional ``{0}`` placeholders.
        doc: One-sentence description using the plain argument names.
    """

    name: str
    polarity: Polarity
    condition: Condition
    invert: bool
    negated: bool
    type_tag: str = ""
    args: tuple[str, ...] = ()
    message: str = ""
    doc: str = ""


@dataclass(frozen=True)
class CompareSpec:
    type_tag: str

    @property
    def name(self) -> str:
        return f"{self.type_tag}_compare"


@dataclass(frozen=True)
class Unrecognized:
    token: str
    reason: str = "unrecognized assertion name"


@dataclass
class Macro:
    """One generated macro with its doc comment."""

    name: str
    doc: str
    text: str

    def render(self) -> str:
        if not self.doc:
            return self.text
        return f"{self.doc}\n{self.text}"
