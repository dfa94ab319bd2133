"""
cssql CLI Utilities.

Shared helpers for reading sources, configuring logging and reporting
errors.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from pathlib import Path

import typer

from cssql._version import get_version
from cssql.core.config import CssqlConfig, discover_config
from cssql.core.errors import ConfigError, CssqlError, LexError, ParseError, extract_snippet

STDIN_NAME = "<stdin>"

ERROR_FORMATS = ("human", "vscode")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"cssql version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()} "
            f"on {platform.system()} {platform.machine()}"
        )
        raise typer.Exit()


def validate_error_format(value: str) -> str:
    """Reject --format values other than human and vscode."""
    if value not in ERROR_FORMATS:
        raise typer.BadParameter(f"expected one of: {', '.join(ERROR_FORMATS)}")
    return value


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; --verbose wins over CSSQL_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("CSSQL_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("cssql").setLevel(level)


def read_source(file: Path | None) -> tuple[str, str]:
    """
    Read stylesheet text from a file, or stdin when file is None or '-'.

    Returns:
        Tuple of (text, display name for error messages)
    """
    if file is None or str(file) == "-":
        return sys.stdin.read(), STDIN_NAME

    try:
        return file.read_text(encoding="utf-8"), str(file)
    except OSError as e:
        typer.echo(f"Error: cannot read {file}: {e.strerror or e}", err=True)
        raise typer.Exit(code=1)


def _error_label(error: CssqlError) -> str:
    if isinstance(error, LexError):
        return "Lex error"
    if isinstance(error, ParseError):
        return "Parse error"
    if isinstance(error, ConfigError):
        return "Config error"
    return "Error"


def print_error(error: CssqlError, text: str | None = None, format: str = "human") -> None:
    """Print an error to stderr in human or VS Code problem-matcher format."""
    context = error.context

    if format == "vscode":
        if context:
            typer.echo(
                f"{context.file or STDIN_NAME}:{context.line}:{context.column}: "
                f"error: {error.message}",
                err=True,
            )
        else:
            typer.echo(f"::error: {error.message}", err=True)
        return

    if context:
        if text is not None and context.snippet is None:
            context.snippet = extract_snippet(text, context.line)
        typer.echo(f"{_error_label(error)}: {context.format()}\n{error.message}", err=True)
    else:
        typer.echo(f"{_error_label(error)}: {error.message}", err=True)


def load_cli_config(path: Path | None, format: str = "human") -> CssqlConfig:
    """Resolve cssql.toml for a command, exiting with code 1 when it is invalid."""
    try:
        return discover_config(path)
    except ConfigError as e:
        print_error(e, format=format)
        raise typer.Exit(code=1)
