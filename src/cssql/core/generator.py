"""
SQL generator for parsed stylesheets.

Each Rule becomes one projection statement::

    .users { name, id }   →   SELECT name, id FROM users;

A rule with no fields renders as ``SELECT FROM <name>;``. Identifiers are
emitted exactly as written, with no quoting or escaping.
"""

from __future__ import annotations

import logging

from . import ir
from .config import KEYWORD_CASES, OutputConfig
from .errors import GenError

logger = logging.getLogger(__name__)


class SqlGenerator:
    """Renders a Document as SQL text, one statement per rule."""

    def __init__(self, config: OutputConfig | None = None):
        self.config = config or OutputConfig()
        if self.config.keyword_case not in KEYWORD_CASES:
            raise GenError(f"Unsupported keyword case: {self.config.keyword_case!r}")

    def keyword(self, word: str) -> str:
        if self.config.keyword_case == "lower":
            return word.lower()
        return word.upper()

    def render_rule(self, rule: ir.Rule) -> str:
        select = self.keyword("SELECT")
        from_ = self.keyword("FROM")
        if not rule.fields:
            return f"{select} {from_} {rule.name};"
        return f"{select} {', '.join(rule.fields)} {from_} {rule.name};"

    def generate(self, document: ir.Document) -> str:
        """Render every rule in document order and join the statements."""
        statements = [self.render_rule(rule) for rule in document.rules]
        logger.debug("Generated %d statement(s)", len(statements))
        return self.config.statement_separator.join(statements)


def generate(document: ir.Document, config: OutputConfig | None = None) -> str:
    """
    Convenience function to render a Document as SQL.

    Args:
        document: Parsed document
        config: Output options (defaults: upper-case keywords, newline separator)

    Returns:
        SQL text; empty string for an empty document
    """
    return SqlGenerator(config).generate(document)
