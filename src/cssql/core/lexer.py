"""
Lexer/Tokenizer for cssql stylesheets.

Converts raw stylesheet text into a lazy stream of tokens with source
location tracking. Whitespace and ``/* ... */`` comments are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import extract_snippet, make_lex_error

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types in the stylesheet syntax."""

    IDENTIFIER = "identifier"

    # Punctuation
    DOT = "."
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","
    SEMICOLON = ";"

    # Special
    EOF = "end of input"


PUNCTUATION = {
    ".": TokenType.DOT,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}


@dataclass(frozen=True)
class Token:
    """
    A single token in the stylesheet.

    Attributes:
        type: Type of token
        value: Literal text of the token
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset into the source (0-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int
    offset: int

    def describe(self) -> str:
        """Human-readable description used in error messages."""
        if self.type == TokenType.IDENTIFIER:
            return f"identifier {self.value!r}"
        if self.type == TokenType.EOF:
            return "end of input"
        return repr(self.value)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"


def is_identifier_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in ("_", "-")


class Lexer:
    """
    Lexer for cssql stylesheets.

    Iterating a Lexer yields tokens lazily, always starting from the
    beginning of the text, and ends with a single EOF token.
    """

    def __init__(self, text: str, file: Path | str | None = None):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
        """
        self.text = text
        self.file = file
        self._reset()

    def _reset(self) -> None:
        self.pos = 0
        self.line = 1
        self.column = 1

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def peek_char(self, offset: int = 1) -> str | None:
        """Peek ahead at character."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return None
        return self.text[pos]

    def advance(self) -> None:
        """Move to next character, updating line/column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_whitespace(self) -> None:
        """Skip whitespace characters, newlines included."""
        while (ch := self.current_char()) is not None and ch.isspace():
            self.advance()

    def skip_comment(self) -> None:
        """Skip a ``/* ... */`` comment starting at the current position."""
        start_line, start_col, start_pos = self.line, self.column, self.pos
        self.advance()  # /
        self.advance()  # *
        while self.current_char() is not None:
            if self.current_char() == "*" and self.peek_char() == "/":
                self.advance()
                self.advance()
                return
            self.advance()

        raise make_lex_error(
            "/",
            self.file,
            start_line,
            start_col,
            start_pos,
            message="Unterminated comment",
            snippet=extract_snippet(self.text, start_line),
        )

    def read_identifier(self) -> str:
        """Read an identifier (letters, digits, '_' and '-')."""
        start = self.pos
        while (ch := self.current_char()) is not None and is_identifier_char(ch):
            self.advance()
        return self.text[start : self.pos]

    def iter_tokens(self) -> Iterator[Token]:
        """
        Yield tokens one at a time.

        Each call scans with its own cursor, so iterations never share
        position state.

        Raises:
            LexError: If a character cannot start any token
        """
        return Lexer(self.text, self.file)._scan()

    def _scan(self) -> Iterator[Token]:
        while True:
            self.skip_whitespace()
            ch = self.current_char()
            if ch is None:
                break

            if ch == "/" and self.peek_char() == "*":
                self.skip_comment()
                continue

            token_line = self.line
            token_col = self.column
            token_pos = self.pos

            if is_identifier_start(ch):
                value = self.read_identifier()
                yield Token(TokenType.IDENTIFIER, value, token_line, token_col, token_pos)

            elif ch in PUNCTUATION:
                self.advance()
                yield Token(PUNCTUATION[ch], ch, token_line, token_col, token_pos)

            else:
                raise make_lex_error(
                    ch,
                    self.file,
                    token_line,
                    token_col,
                    token_pos,
                    snippet=extract_snippet(self.text, token_line),
                )

        logger.debug("Reached end of input at %d:%d", self.line, self.column)
        yield Token(TokenType.EOF, "", self.line, self.column, self.pos)

    def __iter__(self) -> Iterator[Token]:
        return self.iter_tokens()

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source text.

        Returns:
            List of tokens ending with EOF

        Raises:
            LexError: If syntax error encountered
        """
        return list(self.iter_tokens())


def tokenize(text: str, file: Path | str | None = None) -> list[Token]:
    """
    Convenience function to tokenize stylesheet text.

    Args:
        text: Source text
        file: Source file path

    Returns:
        List of tokens
    """
    return Lexer(text, file).tokenize()
