"""
Property-based tests using Hypothesis.

These tests verify translation invariants across generated stylesheets.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from cssql.core import ir
from cssql.core.errors import CssqlError, LexError, ParseError
from cssql.core.formatter import format_document
from cssql.core.generator import generate
from cssql.core.lexer import Lexer, TokenType
from cssql.core.parser import parse
from cssql.core.pipeline import compile_source

identifiers = st.from_regex(r"[a-z_][a-z0-9_-]{0,11}", fullmatch=True)
field_lists = st.lists(identifiers, min_size=0, max_size=6)
rule_lists = st.lists(st.tuples(identifiers, field_lists), min_size=0, max_size=5)


def _render(rules: list[tuple[str, list[str]]], sep: str = ", ") -> str:
    return "\n".join(f".{name} {{ {sep.join(fields)} }}" for name, fields in rules)


class TestTranslationProperties:
    @given(rule_lists)
    @settings(max_examples=100)
    def test_one_statement_per_rule_in_order(self, rules) -> None:
        """Invariant: N rules produce N statements in the same order."""
        sql = compile_source(_render(rules))
        statements = sql.split("\n") if sql else []
        assert len(statements) == len(rules)
        for statement, (name, fields) in zip(statements, rules):
            if fields:
                assert statement == f"SELECT {', '.join(fields)} FROM {name};"
            else:
                assert statement == f"SELECT FROM {name};"

    @given(identifiers, st.lists(identifiers, min_size=1, max_size=8))
    @settings(max_examples=100)
    def test_field_count_matches_projection(self, name, fields) -> None:
        """Invariant: len(rule.fields) equals the number of projected columns."""
        doc = parse(_render([(name, fields)]))
        sql = generate(doc)
        projection = sql[len("SELECT ") : sql.index(" FROM ")]
        assert len(projection.split(", ")) == len(doc.rules[0].fields) == len(fields)

    @given(rule_lists)
    @settings(max_examples=100)
    def test_formatter_roundtrip(self, rules) -> None:
        """Invariant: formatted source re-parses to an equal document."""
        doc = ir.Document(rules=[ir.Rule(name=n, fields=f) for n, f in rules])
        assert parse(format_document(doc)).model_dump() == doc.model_dump()

    @given(rule_lists)
    @settings(max_examples=50)
    def test_separator_style_irrelevant(self, rules) -> None:
        """Invariant: commas, semicolons and trailing separators parse alike."""
        commas = parse(_render(rules, ", ")).model_dump()
        semicolons = parse(_render(rules, "; ")).model_dump()
        assert commas == semicolons


class TestRobustness:
    @given(st.text(min_size=0, max_size=300))
    @settings(max_examples=200)
    def test_only_cssql_errors_on_arbitrary_input(self, text: str) -> None:
        """Invariant: arbitrary text either compiles or raises a CssqlError."""
        try:
            compile_source(text)
        except (LexError, ParseError):
            pass

    @given(st.text(alphabet=st.sampled_from("abc_{},;. \n"), max_size=200))
    @settings(max_examples=200)
    def test_lexer_never_fails_on_valid_alphabet(self, text: str) -> None:
        """Invariant: text built from token characters always lexes, ending in one EOF."""
        tokens = list(Lexer(text))
        assert tokens[-1].type == TokenType.EOF
        assert [t.type for t in tokens].count(TokenType.EOF) == 1
        offsets = [t.offset for t in tokens]
        assert offsets == sorted(offsets)

    @given(st.text(alphabet=st.sampled_from("abc_{},;. \n"), max_size=200))
    @settings(max_examples=200)
    def test_parser_only_raises_parse_error(self, text: str) -> None:
        try:
            parse(text)
        except ParseError as e:
            assert isinstance(e, CssqlError)
            assert e.context is not None
