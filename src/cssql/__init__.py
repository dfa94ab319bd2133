"""
cssql - translate stylesheet-like rule blocks into SQL projections.

    .users { name, id }   →   SELECT name, id FROM users;
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, CssqlError, GenError, LexError, ParseError
from .core.pipeline import compile_source, parse_source

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "compile_source",
    "parse_source",
    "CssqlError",
    "LexError",
    "ParseError",
    "GenError",
    "ConfigError",
]
