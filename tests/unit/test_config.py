"""Tests for cssql.toml loading."""

from pathlib import Path

import pytest

from cssql.core.config import CONFIG_FILENAME, CssqlConfig, discover_config, load_config
from cssql.core.errors import ConfigError


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / CONFIG_FILENAME
    path.write_text(body, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_for_empty_file(self, tmp_path: Path):
        config = load_config(_write(tmp_path, ""))
        assert config == CssqlConfig()
        assert config.output.keyword_case == "upper"
        assert config.output.statement_separator == "\n"
        assert config.input.max_input_size == 0

    def test_all_options(self, tmp_path: Path):
        path = _write(
            tmp_path,
            """
[output]
keyword_case = "lower"
statement_separator = " "

[input]
max_input_size = 4096
""",
        )
        config = load_config(path)
        assert config.output.keyword_case == "lower"
        assert config.output.statement_separator == " "
        assert config.input.max_input_size == 4096

    def test_invalid_keyword_case(self, tmp_path: Path):
        path = _write(tmp_path, '[output]\nkeyword_case = "camel"\n')
        with pytest.raises(ConfigError, match="keyword_case"):
            load_config(path)

    def test_negative_size_limit(self, tmp_path: Path):
        path = _write(tmp_path, "[input]\nmax_input_size = -1\n")
        with pytest.raises(ConfigError, match="max_input_size"):
            load_config(path)

    def test_non_string_separator(self, tmp_path: Path):
        path = _write(tmp_path, "[output]\nstatement_separator = 3\n")
        with pytest.raises(ConfigError, match="statement_separator"):
            load_config(path)

    def test_invalid_toml(self, tmp_path: Path):
        path = _write(tmp_path, "[output\n")
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.toml")


class TestDiscoverConfig:
    def test_defaults_without_file(self, tmp_path: Path):
        assert discover_config(cwd=tmp_path) == CssqlConfig()

    def test_finds_file_in_directory(self, tmp_path: Path):
        _write(tmp_path, '[output]\nkeyword_case = "lower"\n')
        assert discover_config(cwd=tmp_path).output.keyword_case == "lower"

    def test_explicit_path_wins(self, tmp_path: Path):
        _write(tmp_path, '[output]\nkeyword_case = "lower"\n')
        other = tmp_path / "other.toml"
        other.write_text('[output]\nkeyword_case = "upper"\n', encoding="utf-8")
        assert discover_config(other, cwd=tmp_path).output.keyword_case == "upper"
