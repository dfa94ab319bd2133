"""Shared pytest fixtures for cssql tests."""

from pathlib import Path

import pytest

from cssql.core import ir


@pytest.fixture
def users_source() -> str:
    """Return a two-field stylesheet."""
    return ".users {\n  name,\n  id\n}"


@pytest.fixture
def users_rule() -> ir.Rule:
    return ir.Rule(name="users", fields=["name", "id"])


@pytest.fixture
def sample_document(users_rule: ir.Rule) -> ir.Document:
    """Return a document with one populated and one empty rule."""
    return ir.Document(rules=[users_rule, ir.Rule(name="audit_log", fields=[])])


@pytest.fixture
def stylesheet_file(tmp_path: Path, users_source: str) -> Path:
    """Write the users stylesheet to a temporary file."""
    path = tmp_path / "users.css"
    path.write_text(users_source, encoding="utf-8")
    return path
