"""
End-to-end translation: source text → tokens → Document → SQL.

Each stage runs to completion before the next; the first error raised
by any stage aborts the run and no partial output is returned.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import ir
from .config import CssqlConfig, InputConfig
from .errors import CssqlError
from .generator import generate
from .parser import parse

logger = logging.getLogger(__name__)


def check_input_size(text: str, config: InputConfig) -> None:
    """Reject source text larger than the configured ceiling."""
    limit = config.max_input_size
    if limit and len(text) > limit:
        raise CssqlError(f"Input is {len(text)} characters, exceeding the limit of {limit}")


def parse_source(
    text: str,
    file: Path | str | None = None,
    config: CssqlConfig | None = None,
) -> ir.Document:
    """
    Lex and parse stylesheet text.

    Raises:
        LexError: On an unrecognized character
        ParseError: On a grammar violation
        CssqlError: If the input exceeds the configured size limit
    """
    config = config or CssqlConfig()
    check_input_size(text, config.input)
    return parse(text, file)


def compile_source(
    text: str,
    file: Path | str | None = None,
    config: CssqlConfig | None = None,
) -> str:
    """
    Translate stylesheet text into SQL.

    Example:
        >>> compile_source(".users { name, id }")
        'SELECT name, id FROM users;'
    """
    config = config or CssqlConfig()
    document = parse_source(text, file, config)
    sql = generate(document, config.output)
    logger.info("Compiled %d rule(s) from %s", len(document), file or "<input>")
    return sql
