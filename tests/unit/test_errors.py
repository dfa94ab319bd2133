"""Tests for error formatting and the IR models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cssql.core import ir
from cssql.core.errors import (
    CssqlError,
    ErrorContext,
    GenError,
    LexError,
    ParseError,
    ParseErrorKind,
    extract_snippet,
    make_lex_error,
    make_parse_error,
)


class TestErrorContext:
    def test_location_only(self) -> None:
        ctx = ErrorContext(file="a.css", line=3, column=7, offset=20)
        assert ctx.format() == "a.css:3:7"

    def test_in_memory_source(self) -> None:
        ctx = ErrorContext(file=None, line=1, column=1, offset=0)
        assert ctx.format() == "<input>:1:1"

    def test_snippet_marker(self) -> None:
        ctx = ErrorContext(file="a.css", line=2, column=3, offset=5, snippet=".a {\n  x y\n}")
        lines = ctx.format().split("\n")
        assert lines[0] == "a.css:2:3"
        assert lines[1] == "   1 | .a {"
        assert lines[2] == "   2 |   x y"
        assert lines[3] == " " * 9 + "^^^"
        assert lines[4] == "   3 | }"

    def test_extract_snippet(self) -> None:
        text = "l1\nl2\nl3\nl4\nl5\nl6"
        assert extract_snippet(text, 4) == "l2\nl3\nl4\nl5\nl6"
        assert extract_snippet(text, 1) == "l1\nl2\nl3"


class TestHierarchy:
    @pytest.mark.parametrize("cls", [LexError, ParseError, GenError])
    def test_subclasses_base(self, cls: type) -> None:
        assert issubclass(cls, CssqlError)

    def test_message_without_context(self) -> None:
        err = GenError("boom")
        assert str(err) == "boom"
        assert err.context is None

    def test_make_lex_error(self) -> None:
        err = make_lex_error("@", "a.css", 1, 5, 4)
        assert err.char == "@"
        assert err.message == "Unexpected character: '@'"
        assert str(err) == "a.css:1:5\nUnexpected character: '@'"

    def test_make_parse_error(self) -> None:
        err = make_parse_error(
            "expected '}', got '{'",
            None,
            2,
            1,
            9,
            expected=("}",),
            found="'{'",
            rule="users",
        )
        assert err.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert err.message == "unexpected token: expected '}', got '{'"
        assert err.rule == "users"
        assert err.context is not None
        assert err.context.offset == 9


class TestModels:
    def test_rule_requires_name(self) -> None:
        with pytest.raises(ValidationError):
            ir.Rule(name="", fields=["a"])

    def test_rule_is_frozen(self) -> None:
        rule = ir.Rule(name="users", fields=["id"])
        with pytest.raises(ValidationError):
            rule.name = "accounts"  # type: ignore[misc]

    def test_location_excluded_from_dump(self) -> None:
        rule = ir.Rule(name="t", location=ir.SourceLocation(line=1, column=1, offset=0))
        assert rule.model_dump() == {"name": "t", "fields": []}

    def test_document_len(self) -> None:
        doc = ir.Document(rules=[ir.Rule(name="a"), ir.Rule(name="b")])
        assert len(doc) == 2
        assert not doc.is_empty
        assert ir.Document().is_empty
