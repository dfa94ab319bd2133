"""
Translation commands for the cssql CLI: compile, check, tokens, fmt.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from cssql.cli.utils import (
    STDIN_NAME,
    load_cli_config,
    print_error,
    read_source,
    validate_error_format,
)
from cssql.core.errors import CssqlError
from cssql.core.formatter import format_document
from cssql.core.lexer import Lexer
from cssql.core.pipeline import check_input_size, compile_source, parse_source

logger = logging.getLogger(__name__)

console = Console()

CONFIG_HELP = "Path to cssql.toml (default: ./cssql.toml if present)"
FORMAT_HELP = "Error output format: 'human' or 'vscode'"


def compile_command(
    file: Path = typer.Argument(  # noqa: B008
        None, help="Stylesheet to translate (omit or '-' to read stdin)"
    ),
    output: Path = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Write SQL to this file instead of stdout"
    ),
    config: Path = typer.Option(None, "--config", "-c", help=CONFIG_HELP),  # noqa: B008
    format: str = typer.Option(
        "human", "--format", "-f", help=FORMAT_HELP, callback=validate_error_format
    ),
) -> None:
    """
    Translate a stylesheet into SQL SELECT statements.

    Each `.name { field, ... }` rule becomes `SELECT field, ... FROM name;`.
    """
    cfg = load_cli_config(config, format)

    text, name = read_source(file)
    try:
        sql = compile_source(text, name, cfg)
    except CssqlError as e:
        print_error(e, text, format)
        raise typer.Exit(code=1)

    if output is not None:
        output.write_text(sql + "\n" if sql else "", encoding="utf-8")
        logger.info("Wrote SQL to %s", output)
    elif sql:
        typer.echo(sql)


def check_command(
    file: Path = typer.Argument(None, help="Stylesheet to check (omit or '-' for stdin)"),  # noqa: B008
    config: Path = typer.Option(None, "--config", "-c", help=CONFIG_HELP),  # noqa: B008
    format: str = typer.Option(
        "human", "--format", "-f", help=FORMAT_HELP, callback=validate_error_format
    ),
) -> None:
    """
    Parse a stylesheet and report syntax errors without generating SQL.
    """
    cfg = load_cli_config(config, format)

    text, name = read_source(file)
    try:
        document = parse_source(text, name, cfg)
    except CssqlError as e:
        print_error(e, text, format)
        raise typer.Exit(code=1)

    typer.echo(f"OK: {len(document)} rule(s)")


def tokens_command(
    file: Path = typer.Argument(None, help="Stylesheet to tokenize (omit or '-' for stdin)"),  # noqa: B008
    config: Path = typer.Option(None, "--config", "-c", help=CONFIG_HELP),  # noqa: B008
    format: str = typer.Option(
        "human", "--format", "-f", help=FORMAT_HELP, callback=validate_error_format
    ),
) -> None:
    """
    Print the token stream of a stylesheet.
    """
    cfg = load_cli_config(config, format)

    text, name = read_source(file)

    table = Table(title=f"Tokens: {name}")
    table.add_column("Pos", style="bright_black")
    table.add_column("Offset", justify="right", style="bright_black")
    table.add_column("Type", style="cyan")
    table.add_column("Value")

    try:
        check_input_size(text, cfg.input)
        for token in Lexer(text, name):
            table.add_row(
                f"{token.line}:{token.column}",
                str(token.offset),
                token.type.name,
                token.value,
            )
    except CssqlError as e:
        print_error(e, text, format)
        raise typer.Exit(code=1)

    console.print(table)


def fmt_command(
    file: Path = typer.Argument(None, help="Stylesheet to format (omit or '-' for stdin)"),  # noqa: B008
    write: bool = typer.Option(False, "--write", "-w", help="Rewrite the file in place"),
    config: Path = typer.Option(None, "--config", "-c", help=CONFIG_HELP),  # noqa: B008
    format: str = typer.Option(
        "human", "--format", "-f", help=FORMAT_HELP, callback=validate_error_format
    ),
) -> None:
    """
    Print a stylesheet in canonical layout: one field per line.
    """
    cfg = load_cli_config(config, format)

    text, name = read_source(file)
    if write and name == STDIN_NAME:
        typer.echo("Error: --write needs a file argument", err=True)
        raise typer.Exit(code=1)

    try:
        document = parse_source(text, name, cfg)
    except CssqlError as e:
        print_error(e, text, format)
        raise typer.Exit(code=1)

    formatted = format_document(document)
    if write:
        file.write_text(formatted, encoding="utf-8")
        typer.echo(f"Formatted {name}")
    else:
        typer.echo(formatted, nl=False)
