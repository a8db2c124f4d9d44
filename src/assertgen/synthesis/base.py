"""Shared rendering helpers for generated macros."""

from __future__ import annotations

import string
import textwrap
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

VARIADIC_PARAM = "..."
VARIADIC_DOC = "optional message: printf-style format string followed by its arguments"


@lru_cache(maxsize=None)
def template_env() -> Environment:
    template_dir = Path(__file__).resolve().parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render(template_name: str, **context: object) -> str:
    """Render one of the bundled templates without its trailing newline."""
    return template_env().get_template(template_name).render(**context)


def _wrap(text: str, width: int, indent: str = "") -> list[str]:
    return textwrap.wrap(
        text,
        width=width,
        initial_indent=indent,
        subsequent_indent=indent,
        break_long_words=False,
        break_on_hyphens=False,
    ) or [""]


def doc_comment(
    summary: str,
    params: list[tuple[str, str]],
    width: int,
    notes: list[str] | None = None,
    returns: list[str] | None = None,
) -> str:
    """Lay out a ``/** ... */`` block.

    Parameter descriptions start on a common column so the names line up;
    continuation lines of a wrapped description are indented to that column.
    ``width`` is the full line width including the `` * `` gutter.
    """
    body_width = max(width - 3, 20)
    lines = _wrap(summary, body_width)
    for note in notes or []:
        lines.append("")
        lines.extend(_wrap(note, body_width))

    if params:
        lines.append("")
        name_width = max(len(name) for name, _ in params)
        for name, description in params:
            head = f"@param {name.ljust(name_width)}  "
            wrapped = _wrap(description, body_width - len(head))
            lines.append(head + wrapped[0])
            lines.extend(" " * len(head) + rest for rest in wrapped[1:])

    if returns:
        head = "@return "
        lines.append(head + returns[0])
        lines.extend(" " * len(head) + band for band in returns[1:])

    out = ["/**"]
    out.extend(f" * {line}" if line else " *" for line in lines)
    out.append(" */")
    return "\n".join(out)


def c_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def stringify_message(template: str, args: tuple[str, ...]) -> str:
    """Render a message template as C string pieces.

    Literal text becomes string literals and each ``{n}`` placeholder becomes
    ``#arg`` so the preprocessor pastes in the caller's source text.
    """
    pieces: list[str] = []
    for literal, field_name, _spec, _conv in string.Formatter().parse(template):
        if literal:
            pieces.append(c_string(literal))
        if field_name is not None:
            pieces.append(f"#{args[int(field_name)]}")
    return " ".join(pieces) or '""'
