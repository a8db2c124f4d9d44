"""Decode assertion and comparator names into structured specs.

Grammar summary::

    Fail_if<Rest> | Fail_unless<Rest> | Assert_not<Rest> | Assert_<Rest> | Assert<Rest>
    <Type>_compare

``Rest`` selects the condition kind. See ``_RULES`` for the priority order.
"""

from __future__ import annotations

import re
from typing import Callable

from assertgen.model import (
    DEFAULT_TYPE,
    AssertionSpec,
    Boolean,
    CompareSpec,
    Condition,
    Identity,
    LiteralEquality,
    NullCheck,
    Polarity,
    Relational,
    RelOp,
    ResultStatus,
    TruthValue,
    Unrecognized,
)

ParseResult = AssertionSpec | CompareSpec | Unrecognized

# Longest prefix first: "Assert_not" must win over "Assert_" and "Assert".
_PREFIXES: list[tuple[str, Polarity]] = [
    ("Fail_unless", Polarity.FAIL_UNLESS),
    ("Fail_if", Polarity.FAIL_IF),
    ("Assert_not", Polarity.ASSERT_NOT),
    ("Assert_", Polarity.ASSERT),
    ("Assert", Polarity.ASSERT),
]

# Suffix -> (operator, extra inversion). NE is EQ tested the other way round.
_SUFFIXES: list[tuple[str, RelOp, bool]] = [
    ("Equal", RelOp.EQ, False),
    ("equal", RelOp.EQ, False),
    ("LT", RelOp.LT, False),
    ("LE", RelOp.LE, False),
    ("EQ", RelOp.EQ, False),
    ("GE", RelOp.GE, False),
    ("GT", RelOp.GT, False),
    ("NE", RelOp.EQ, True),
]

_STATUS_WORDS = {"Error", "error", "Failure", "failure", "Success", "success"}
_TRUTH_WORDS = {"True", "true", "False", "false"}
_IDENTITY_WORDS = {"Same", "same"}

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_COMPARE_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_]*?)_compare")

_NUMERALS: list[tuple[re.Pattern[str], int, int]] = [
    (re.compile(r"0[xX]([0-9a-fA-F]+)"), 16, 2),
    (re.compile(r"0[bB]([01]+)"), 2, 2),
    (re.compile(r"0([0-7]+)"), 8, 1),
    (re.compile(r"(0|[1-9][0-9]*)"), 10, 0),
]

# Kinds whose negation is folded into an == / != operator.
_FOLDED = (NullCheck, LiteralEquality, Identity)


def parse_numeral(text: str) -> int | None:
    """Decode a C integer literal: hex (0x), binary (0b), octal (0), decimal."""
    for pattern, base, skip in _NUMERALS:
        if pattern.fullmatch(text):
            return int(text[skip:], base)
    return None


def _split_prefix(token: str) -> tuple[Polarity | None, str]:
    for prefix, polarity in _PREFIXES:
        if token.startswith(prefix):
            return polarity, token[len(prefix) :]
    return None, token


def _split_relational(rest: str) -> tuple[str, RelOp, bool] | None:
    for suffix, op, flips in _SUFFIXES:
        if not rest.endswith(suffix):
            continue
        type_tag = rest[: -len(suffix)]
        if type_tag and not _IDENTIFIER_RE.fullmatch(type_tag):
            return None
        return type_tag or DEFAULT_TYPE, op, flips
    return None


def _relational(rest: str) -> tuple[Condition, str, bool]:
    type_tag, op, flips = _split_relational(rest)
    return Relational(op), type_tag, flips


def _literal(rest: str) -> tuple[Condition, str, bool]:
    return LiteralEquality(parse_numeral(rest), rest), "", False


# Ordered (predicate, builder) rules. A builder returns the condition, the
# type tag and whether the token itself flips the positive sense.
_RULES: list[
    tuple[Callable[[str], bool], Callable[[str], tuple[Condition, str, bool]]]
] = [
    (lambda rest: _split_relational(rest) is not None, _relational),
    (lambda rest: rest == "", lambda rest: (Boolean(), "", False)),
    (
        lambda rest: rest in _STATUS_WORDS,
        lambda rest: (ResultStatus(), "", rest.lower() == "success"),
    ),
    (
        lambda rest: rest in _TRUTH_WORDS,
        lambda rest: (TruthValue(), "", rest.lower() == "false"),
    ),
    (lambda rest: rest == "NULL", lambda rest: (NullCheck(), "", False)),
    (lambda rest: parse_numeral(rest) is not None, _literal),
    (lambda rest: rest in _IDENTITY_WORDS, lambda rest: (Identity(), "", False)),
]


def describe(polarity: Polarity, condition: Condition, negated: bool) -> str:
    """Return the doc sentence template for a decoded assertion."""
    if polarity is Polarity.FAIL_IF:
        return f"Fails if {condition.clause(not negated)}."
    if polarity is Polarity.FAIL_UNLESS:
        return f"Fails unless {condition.clause(negated)}."
    return f"Asserts that {condition.clause(negated)}."


def _build(
    token: str,
    polarity: Polarity,
    condition: Condition,
    type_tag: str,
    flips: bool,
) -> AssertionSpec:
    negated = polarity.inverts != flips
    args = condition.args(type_tag)
    return AssertionSpec(
        name=token,
        polarity=polarity,
        condition=condition,
        invert=negated and not isinstance(condition, _FOLDED),
        negated=negated,
        type_tag=type_tag,
        args=args,
        message=condition.failure(negated),
        doc=describe(polarity, condition, negated).format(*args),
    )


def parse(token: str) -> ParseResult:
    """Classify one identifier.

    Returns an ``AssertionSpec`` for assertion names, a ``CompareSpec`` for
    ``<Type>_compare`` names and ``Unrecognized`` for everything else.
    """
    polarity, rest = _split_prefix(token)
    if polarity is None:
        match = _COMPARE_RE.fullmatch(token)
        if match:
            return CompareSpec(match.group(1))
        return Unrecognized(token, "not an assertion or comparator name")

    for matches, build in _RULES:
        if matches(rest):
            condition, type_tag, flips = build(rest)
            return _build(token, polarity, condition, type_tag, flips)

    return Unrecognized(token, f"unknown condition {rest!r}")
