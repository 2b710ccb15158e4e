"""
parencalc CLI.

Commands:
- eval:   Evaluate an expression and print ``EXPRESSION = RESULT``
- tokens: Show the tokenizer output
- ast:    Show the parsed tree
- repl:   Evaluate expressions read line by line
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from parencalc._version import get_version
from parencalc.core.config import CalcConfig, load_config
from parencalc.core.errors import CalcError, ConfigError, ErrorContext
from parencalc.core.expression_lang import evaluate, parse_expr, tokenize
from parencalc.core.logging import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Integer addition/subtraction calculator with nested parentheses.",
    no_args_is_help=True,
)

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)

_QUIT_WORDS = {"quit", "exit"}


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"parencalc {get_version()}")
        raise typer.Exit()


def _build_config(
    config_path: Path | None,
    lenient: bool | None,
    int_bits: int | None,
    max_depth: int | None,
) -> CalcConfig:
    """Load file/environment settings, then apply command-line overrides."""
    config = load_config(config_path)

    overrides: dict[str, Any] = {}
    if lenient is not None:
        overrides["lenient_operators"] = lenient
    if int_bits is not None:
        overrides["int_bits"] = int_bits
    if max_depth is not None:
        overrides["max_depth"] = max_depth
    if not overrides:
        return config

    try:
        return CalcConfig.model_validate({**config.model_dump(), **overrides})
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid option: {e}") from e


def _report_error(error: CalcError, source: str) -> None:
    """Print an error with a caret under the offending position."""
    err_console.print(f"[red]Error:[/red] {escape(error.message)}")
    if error.pos is not None:
        err_console.print(escape(ErrorContext(source=source, pos=error.pos).format()))


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="TOML config file (default: ./parencalc.toml if present)",
    ),
    lenient: bool | None = typer.Option(
        None,
        "--lenient/--strict",
        help="Let a second operator overwrite the pending one",
    ),
    int_bits: int | None = typer.Option(None, "--int-bits", help="Signed integer width"),
    max_depth: int | None = typer.Option(None, "--max-depth", help="Maximum nesting depth"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write JSONL logs here"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """parencalc CLI main callback for global options."""
    setup_logging(logging.DEBUG if verbose else logging.INFO, log_file)

    try:
        ctx.obj = _build_config(config_path, lenient, int_bits, max_depth)
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise typer.Exit(code=1)

    logger.debug("Using %r", ctx.obj)


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression, e.g. '(13+4)-(12+1)'"),
) -> None:
    """Evaluate an expression."""
    try:
        result = evaluate(expression, ctx.obj)
    except CalcError as e:
        _report_error(e, expression)
        raise typer.Exit(code=1)

    console.print(escape(f"{expression} = {result}"))


@app.command(name="tokens")
def tokens_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to tokenize"),
    table: bool = typer.Option(False, "--table", "-t", help="Show kinds and positions"),
) -> None:
    """Show the tokens of an expression."""
    try:
        tokens = tokenize(expression, ctx.obj)
    except CalcError as e:
        _report_error(e, expression)
        raise typer.Exit(code=1)

    if not table:
        typer.echo("\t".join(t.text for t in tokens))
        return

    output = Table(title="Tokens")
    output.add_column("#", style="dim", justify="right")
    output.add_column("Kind")
    output.add_column("Text")
    output.add_column("Pos", justify="right")
    for index, tok in enumerate(tokens):
        output.add_row(str(index), tok.kind.name, escape(tok.text), str(tok.pos))
    console.print(output)


@app.command(name="ast")
def ast_command(
    ctx: typer.Context,
    expression: str = typer.Argument(..., help="Expression to parse"),
    as_json: bool = typer.Option(False, "--json", help="Print the tree as JSON"),
) -> None:
    """Show the parsed tree of an expression."""
    try:
        expr = parse_expr(expression, ctx.obj)
    except CalcError as e:
        _report_error(e, expression)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(expr.model_dump_json(indent=2))
    else:
        typer.echo(str(expr))


@app.command(name="repl")
def repl_command(ctx: typer.Context) -> None:
    """Read expressions line by line until EOF or 'quit'."""
    count = 0
    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        source = line.strip()
        if not source:
            continue
        if source.lower() in _QUIT_WORDS:
            break

        count += 1
        try:
            console.print(str(evaluate(source, ctx.obj)))
        except CalcError as e:
            _report_error(e, source)

    logger.debug("REPL evaluated %d expressions", count)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
