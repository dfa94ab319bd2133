"""
Recursive descent parser for cssql stylesheets.

Grammar:
    document   → rule* EOF
    rule       → selector "{" field_list? "}"
    selector   → "."? IDENTIFIER
    field_list → IDENTIFIER (sep IDENTIFIER)* sep?
    sep        → "," | ";"

The grammar is LL(1): the parser keeps one token of lookahead over a
lazily consumed token stream and never backtracks.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from . import ir
from .errors import ParseError, ParseErrorKind, make_parse_error
from .lexer import Lexer, Token, TokenType

logger = logging.getLogger(__name__)

FIELD_SEPARATORS = (TokenType.COMMA, TokenType.SEMICOLON)


class Parser:
    """
    Recursive descent parser for stylesheets.

    Consumes tokens one at a time and builds a Document.
    """

    def __init__(self, tokens: Iterable[Token], file: Path | str | None = None):
        """
        Initialize parser.

        Args:
            tokens: Token stream (a Lexer, a list, or any iterable)
            file: Source file path (for error reporting)
        """
        self.file = file
        self._stream: Iterator[Token] = iter(tokens)
        self._last: Token | None = None
        self.current = self._next_from_stream()

    def _next_from_stream(self) -> Token:
        token = next(self._stream, None)
        if token is None:
            # Stream ran out without an explicit EOF
            last = self._last
            if last is None:
                return Token(TokenType.EOF, "", 1, 1, 0)
            return Token(
                TokenType.EOF,
                "",
                last.line,
                last.column + len(last.value),
                last.offset + len(last.value),
            )
        self._last = token
        return token

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current
        if token.type != TokenType.EOF:
            self.current = self._next_from_stream()
        return token

    def match(self, *token_types: TokenType) -> Token | None:
        if self.current.type in token_types:
            return self.advance()
        return None

    def _unexpected(self, *expected: TokenType, rule: str | None = None) -> ParseError:
        token = self.current
        wanted = tuple(t.value for t in expected)
        return make_parse_error(
            f"expected {' or '.join(repr(w) for w in wanted)}, got {token.describe()}",
            self.file,
            token.line,
            token.column,
            token.offset,
            kind=ParseErrorKind.UNEXPECTED_TOKEN,
            expected=wanted,
            found=token.describe(),
            rule=rule,
        )

    def _unterminated(self, name: str, opening: Token) -> ParseError:
        return make_parse_error(
            f"rule {name!r} opened at {opening.line}:{opening.column} is never closed",
            self.file,
            opening.line,
            opening.column,
            opening.offset,
            kind=ParseErrorKind.UNTERMINATED_RULE,
            expected=(TokenType.RBRACE.value,),
            found=self.current.describe(),
            rule=name,
        )

    def expect(self, token_type: TokenType, rule: str | None = None) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        if self.current.type != token_type:
            raise self._unexpected(token_type, rule=rule)
        return self.advance()

    # -- Grammar rules --

    def parse_document(self) -> ir.Document:
        """rule* EOF"""
        rules: list[ir.Rule] = []
        while self.current.type != TokenType.EOF:
            rules.append(self.parse_rule())
        logger.debug("Parsed %d rule(s)", len(rules))
        return ir.Document(rules=rules)

    def parse_selector(self) -> str:
        """"."? IDENTIFIER"""
        self.match(TokenType.DOT)
        token = self.current
        if token.type != TokenType.IDENTIFIER:
            raise make_parse_error(
                f"got {token.describe()}",
                self.file,
                token.line,
                token.column,
                token.offset,
                kind=ParseErrorKind.EXPECTED_SELECTOR,
                expected=(TokenType.IDENTIFIER.value,),
                found=token.describe(),
            )
        return self.advance().value

    def parse_rule(self) -> ir.Rule:
        """selector "{" field_list? "}" """
        start = self.current
        name = self.parse_selector()
        logger.debug("Parsing rule %r at %d:%d", name, start.line, start.column)

        opening = self.expect(TokenType.LBRACE, rule=name)
        fields = self.parse_field_list(name, opening)

        return ir.Rule(
            name=name,
            fields=fields,
            location=ir.SourceLocation(line=start.line, column=start.column, offset=start.offset),
        )

    def parse_field_list(self, name: str, opening: Token) -> list[str]:
        """IDENTIFIER (sep IDENTIFIER)* sep? "}" """
        fields: list[str] = []

        while True:
            if self.current.type == TokenType.EOF:
                raise self._unterminated(name, opening)
            if self.match(TokenType.RBRACE):
                return fields

            if self.current.type != TokenType.IDENTIFIER:
                raise self._unexpected(TokenType.IDENTIFIER, TokenType.RBRACE, rule=name)
            fields.append(self.advance().value)

            if self.current.type == TokenType.EOF:
                raise self._unterminated(name, opening)
            if self.current.type == TokenType.RBRACE:
                continue
            if self.match(*FIELD_SEPARATORS) is None:
                raise self._unexpected(*FIELD_SEPARATORS, TokenType.RBRACE, rule=name)


def parse_tokens(tokens: Iterable[Token], file: Path | str | None = None) -> ir.Document:
    """
    Parse a token stream into a Document.

    Raises:
        ParseError: If the tokens do not form a valid stylesheet
    """
    parser = Parser(tokens, file)
    return parser.parse_document()


def parse(text: str, file: Path | str | None = None) -> ir.Document:
    """
    Parse stylesheet text into a Document.

    Tokens are produced lazily, so a lexical error after a syntax error is
    never reached.

    Raises:
        LexError: If tokenization fails
        ParseError: If the text is not a valid stylesheet
    """
    return parse_tokens(Lexer(text, file), file)
