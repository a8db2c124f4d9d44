from __future__ import annotations

import json
import sys
from pathlib import Path

import typer

app = typer.Typer(name="assertgen", help="Generate C assertion macros from their names")


def _read_lines(files: list[str]) -> list[str]:
    if not files:
        return sys.stdin.read().splitlines()
    lines: list[str] = []
    for name in files:
        path = Path(name)
        if not path.is_file():
            typer.echo(f"Error: input file not found: {name}", err=True)
            raise typer.Exit(1)
        lines.extend(path.read_text().splitlines())
    return lines


@app.command()
def generate(
    files: list[str] | None = typer.Argument(
        None, help="Files listing one macro name per line (default: stdin)"
    ),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to generator YAML config"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Write the header here instead of stdout"
    ),
    scan: bool = typer.Option(
        False, "--scan", help="Pick macro names out of arbitrary source text"
    ),
    guard: str | None = typer.Option(None, "--guard", help="Header guard macro"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to stderr"
    ),
    debug_log: str | None = typer.Option(
        None, "--debug-log", help="Also write debug output to this file"
    ),
):
    """Generate a header defining every assertion named in the input."""
    from assertgen.config import GeneratorConfig, load_config
    from assertgen.generator import Generator, read_tokens
    from assertgen.verbose import setup_logger

    config_path = Path(config) if config is not None else None
    if config_path is not None and not config_path.exists():
        typer.echo(f"Error: config file not found: {config}", err=True)
        raise typer.Exit(1)

    try:
        gen_config = load_config(config_path)
        if guard is not None:
            gen_config = GeneratorConfig(**{**gen_config.model_dump(), "guard": guard})
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        Path(debug_log) if debug_log else None,
        verbose=verbose,
        logger_name="assertgen",
    )

    lines = _read_lines(files or [])
    result = Generator(gen_config, logger=logger).run(read_tokens(lines, scan=scan))
    logger.debug(
        f"Generated {result.assertions} assertion(s), "
        f"{result.comparators} comparator(s), "
        f"{len(result.diagnostics)} diagnostic(s)"
    )

    if output is not None:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(result.text)
    else:
        typer.echo(result.text, nl=False)

    if result.unresolved:
        typer.echo(
            f"Note: unresolved dependencies: {', '.join(result.unresolved)}",
            err=True,
        )


@app.command("parse")
def parse_command(
    tokens: list[str] = typer.Argument(help="Macro names to decode"),
):
    """Show how macro names are decoded."""
    from assertgen.model import AssertionSpec, CompareSpec
    from assertgen.parser import parse
    from assertgen.registry import DependencyRegistry
    from assertgen.synthesis import MacroSynthesizer

    synth = MacroSynthesizer(DependencyRegistry())
    failed = False

    for token in tokens:
        result = parse(token)
        if isinstance(result, AssertionSpec):
            typer.echo(f"{token}: assertion")
            typer.echo(f"  polarity:   {result.polarity.value}")
            typer.echo(f"  condition:  {result.condition.kind}")
            if result.type_tag:
                typer.echo(f"  type:       {result.type_tag}")
            typer.echo(f"  invert:     {result.invert}")
            typer.echo(f"  args:       {', '.join(result.args)}")
            typer.echo(f"  expression: {synth.expression(result)}")
            typer.echo(f"  doc:        {result.doc}")
        elif isinstance(result, CompareSpec):
            typer.echo(f"{token}: comparator for {result.type_tag}")
        else:
            typer.echo(f"{token}: unrecognized ({result.reason})")
            failed = True

    if failed:
        raise typer.Exit(1)


@app.command()
def schema(
    out: str | None = typer.Option(
        None, help="Write the config JSON Schema here instead of stdout"
    ),
):
    """Print the JSON Schema of the generator config file."""
    from assertgen.config import GeneratorConfig

    text = json.dumps(GeneratorConfig.model_json_schema(), indent=2) + "\n"
    if out is None:
        typer.echo(text, nl=False)
        return
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text)
    typer.echo(f"Wrote schema: {out_path}")
