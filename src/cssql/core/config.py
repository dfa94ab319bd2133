"""
Project configuration loaded from ``cssql.toml``.

Example::

    [output]
    keyword_case = "upper"        # or "lower"
    statement_separator = "\\n"

    [input]
    max_input_size = 1048576      # characters; 0 disables the limit
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "cssql.toml"
KEYWORD_CASES = ("upper", "lower")


@dataclass
class OutputConfig:
    """How generated SQL is rendered."""

    keyword_case: str = "upper"
    statement_separator: str = "\n"


@dataclass
class InputConfig:
    """Limits applied to source text before lexing."""

    max_input_size: int = 0  # 0 = unlimited


@dataclass
class CssqlConfig:
    output: OutputConfig = field(default_factory=OutputConfig)
    input: InputConfig = field(default_factory=InputConfig)


def load_config(path: Path) -> CssqlConfig:
    """
    Load a cssql.toml file.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    output_data = data.get("output", {})
    input_data = data.get("input", {})

    keyword_case = output_data.get("keyword_case", "upper")
    if keyword_case not in KEYWORD_CASES:
        raise ConfigError(
            f"{path}: output.keyword_case must be one of {', '.join(KEYWORD_CASES)}, "
            f"got {keyword_case!r}"
        )

    separator = output_data.get("statement_separator", "\n")
    if not isinstance(separator, str):
        raise ConfigError(f"{path}: output.statement_separator must be a string")

    max_input_size = input_data.get("max_input_size", 0)
    if not isinstance(max_input_size, int) or max_input_size < 0:
        raise ConfigError(f"{path}: input.max_input_size must be a non-negative integer")

    logger.debug("Loaded configuration from %s", path)
    return CssqlConfig(
        output=OutputConfig(keyword_case=keyword_case, statement_separator=separator),
        input=InputConfig(max_input_size=max_input_size),
    )


def discover_config(explicit: Path | None = None, cwd: Path | None = None) -> CssqlConfig:
    """
    Resolve the configuration for a run.

    Uses ``explicit`` when given, else ``cssql.toml`` in ``cwd`` (default:
    the current directory) when it exists, else defaults.
    """
    if explicit is not None:
        return load_config(explicit)

    candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return load_config(candidate)
    return CssqlConfig()
