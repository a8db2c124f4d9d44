from __future__ import annotations

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def _check_identifier(value: str, what: str) -> str:
    if not _IDENTIFIER_RE.fullmatch(value):
        raise ValueError(f"{what} must be a C identifier, got {value!r}")
    return value


class GeneratorConfig(BaseModel):
    """Settings for one generation run. Every field has a usable default."""

    model_config = ConfigDict(extra="forbid")

    guard: str = "ASSERTIONS_H"
    report_function: str = "_assert_report"
    failure_test: str = "({expr}) != 0"
    wrap_width: int = Field(78, ge=40, le=200)
    null_header: str = "stddef.h"
    string_header: str = "string.h"
    builtin_types: list[str] = ["Number", "String"]
    includes: list[str] = []

    @field_validator("guard", "report_function")
    @classmethod
    def must_be_identifier(cls, v: str, info: ValidationInfo) -> str:
        return _check_identifier(v, info.field_name)

    @field_validator("builtin_types")
    @classmethod
    def builtin_types_are_identifiers(cls, v: list[str]) -> list[str]:
        for name in v:
            _check_identifier(name, "builtin type")
        return v

    @field_validator("failure_test")
    @classmethod
    def failure_test_mentions_expr(cls, v: str) -> str:
        if "{expr}" not in v:
            raise ValueError("failure_test must contain the {expr} placeholder")
        return v


def load_config(path: Path | None) -> GeneratorConfig:
    """Load and validate a generator config from a YAML file.

    ``None`` and empty files both yield the defaults.
    """
    if path is None:
        return GeneratorConfig()

    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return GeneratorConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    return GeneratorConfig(**raw)
