"""
Error types for cssql lexing, parsing, generation and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class CssqlError(Exception):
    """Base exception for all cssql errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class LexError(CssqlError):
    """
    Raised when the lexer meets a character that cannot start a token.

    Examples:
    - Stray punctuation such as ``@`` or ``:``
    - A digit where an identifier is expected
    - An unterminated ``/*`` comment
    """

    def __init__(self, message: str, char: str, context: Optional["ErrorContext"] = None):
        self.char = char
        super().__init__(message, context)


class ParseErrorKind(str, Enum):
    """Structural grammar violations reported by the parser."""

    UNTERMINATED_RULE = "unterminated rule"
    UNEXPECTED_TOKEN = "unexpected token"
    EXPECTED_SELECTOR = "expected selector name"


class ParseError(CssqlError):
    """
    Raised when the token stream does not match the stylesheet grammar.

    Attributes:
        kind: Which grammar rule was violated
        expected: Descriptions of the token kinds that would have been valid
        found: Description of the token actually found
        rule: Name of the rule being parsed, when known
    """

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        *,
        kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN,
        expected: tuple[str, ...] = (),
        found: str | None = None,
        rule: str | None = None,
    ):
        self.kind = kind
        self.expected = expected
        self.found = found
        self.rule = rule
        super().__init__(message, context)


class GenError(CssqlError):
    """
    Raised when the generator cannot render a document.

    Examples:
    - Unsupported keyword case in the output configuration
    """

    pass


class ConfigError(CssqlError):
    """Raised when cssql.toml cannot be loaded or holds invalid values."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, or None for in-memory text
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset into the source (0-indexed)
        snippet: Optional source lines around the error location
    """

    file: Path | str | None
    line: int
    column: int
    offset: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "users.css:3:5"
        """
        location = f"{self.file or '<input>'}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet starts up to 2 lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def extract_snippet(text: str, line: int, radius: int = 2) -> str:
    """Return the source lines within ``radius`` of ``line`` (1-indexed)."""
    lines = text.split("\n")
    start = max(0, line - 1 - radius)
    end = min(len(lines), line + radius)
    return "\n".join(lines[start:end])


def make_lex_error(
    char: str,
    file: Path | str | None,
    line: int,
    column: int,
    offset: int,
    message: str | None = None,
    snippet: str | None = None,
) -> LexError:
    """
    Helper to create a LexError with context.

    Args:
        char: The offending character
        file: Source file path, if any
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        offset: Character offset (0-indexed)
        message: Error description (defaults to "Unexpected character")
        snippet: Optional code snippet

    Returns:
        LexError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, offset=offset, snippet=snippet)
    return LexError(message or f"Unexpected character: {char!r}", char, context)


def make_parse_error(
    message: str,
    file: Path | str | None,
    line: int,
    column: int,
    offset: int,
    *,
    kind: ParseErrorKind = ParseErrorKind.UNEXPECTED_TOKEN,
    expected: tuple[str, ...] = (),
    found: str | None = None,
    rule: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, offset=offset)
    return ParseError(
        f"{kind.value}: {message}",
        context,
        kind=kind,
        expected=expected,
        found=found,
        rule=rule,
    )
