"""Render a Document back to canonical stylesheet text."""

from __future__ import annotations

from . import ir


def format_rule(rule: ir.Rule, indent: int = 2) -> str:
    if not rule.fields:
        return f".{rule.name} {{}}"
    pad = " " * indent
    body = ",\n".join(f"{pad}{field}" for field in rule.fields)
    return f".{rule.name} {{\n{body}\n}}"


def format_document(document: ir.Document, indent: int = 2) -> str:
    """
    Format a Document as stylesheet source.

    Rules are separated by a blank line and the result ends with a newline
    unless the document is empty. Parsing the output yields an equal
    Document.
    """
    if document.is_empty:
        return ""
    return "\n\n".join(format_rule(rule, indent) for rule in document.rules) + "\n"
