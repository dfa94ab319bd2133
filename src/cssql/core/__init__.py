"""Core cssql functionality: lexer, parser, IR, SQL generator, formatter, configuration."""

from . import ir
from .config import CssqlConfig, InputConfig, OutputConfig, discover_config, load_config
from .errors import (
    ConfigError,
    CssqlError,
    ErrorContext,
    GenError,
    LexError,
    ParseError,
    ParseErrorKind,
)
from .formatter import format_document
from .generator import SqlGenerator, generate
from .lexer import Lexer, Token, TokenType, tokenize
from .parser import Parser, parse, parse_tokens
from .pipeline import compile_source, parse_source

__all__ = [
    "ir",
    "CssqlError",
    "LexError",
    "ParseError",
    "ParseErrorKind",
    "GenError",
    "ConfigError",
    "ErrorContext",
    "CssqlConfig",
    "InputConfig",
    "OutputConfig",
    "discover_config",
    "load_config",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse",
    "parse_tokens",
    "SqlGenerator",
    "generate",
    "format_document",
    "compile_source",
    "parse_source",
]
