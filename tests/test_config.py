"""Tests for featuredocs.lib.config and featuredocs.lib.envparse modules."""

from pathlib import Path

import pytest

from featuredocs.errors import ConfigError
from featuredocs.lib.config import (
    feature_paths,
    find_project_root,
    load_project_config,
)
from featuredocs.lib.constants import VALID_ROLLUP_MODES
from featuredocs.lib.envparse import parse_env


class TestParseEnv:
    """Test the KEY=value parser."""

    def test_parses_quoted_and_exported(self):
        env = parse_env(
            '# project settings\n'
            'SPECS_DIR="docs/specs"\n'
            "\n"
            "export ROLLUP_MODE='legacy'\n"
            "LOCK_TIMEOUT=5\n"
        )
        assert env == {"SPECS_DIR": "docs/specs", "ROLLUP_MODE": "legacy", "LOCK_TIMEOUT": "5"}

    @pytest.mark.parametrize("value", ["$(rm -rf /)", "`id`", "${HOME}", "a;b", "a|b", "a && b"])
    def test_rejects_shell_patterns(self, value):
        with pytest.raises(ValueError, match="Forbidden pattern"):
            parse_env(f"SPECS_DIR={value}\n")

    def test_rejects_lowercase_key(self):
        with pytest.raises(ValueError, match="Invalid key"):
            parse_env("specs_dir=specs\n")

    def test_rejects_line_without_equals(self):
        with pytest.raises(ValueError, match="line 2"):
            parse_env("SPECS_DIR=specs\nnonsense\n")


class TestLoadProjectConfig:
    """Test load_project_config."""

    def test_defaults_without_file(self, tmp_path):
        config = load_project_config(tmp_path)
        assert config.root == tmp_path
        assert config.specs_dir == "specs"
        assert config.root_changelog == "CHANGELOG.md"
        assert config.rollup_mode == "verbatim"
        assert config.lock_timeout == 10
        assert config.locks_dir == tmp_path / ".featuredocs" / "locks"

    def test_reads_file(self, tmp_path):
        (tmp_path / "featuredocs.env").write_text(
            'SPECS_DIR="features"\nROOT_CHANGELOG="HISTORY.md"\nROLLUP_MODE="legacy"\nLOCK_TIMEOUT="3"\n'
        )
        config = load_project_config(tmp_path)
        assert config.specs_dir == "features"
        assert config.root_changelog == "HISTORY.md"
        assert config.rollup_mode == "legacy"
        assert config.lock_timeout == 3

    def test_unknown_rollup_mode_defaults_with_warning(self, tmp_path, caplog):
        (tmp_path / "featuredocs.env").write_text('ROLLUP_MODE="sed"\n')
        config = load_project_config(tmp_path)
        assert config.rollup_mode == "verbatim"
        assert "Unknown ROLLUP_MODE 'sed'" in caplog.text

    @pytest.mark.parametrize("line", [
        'LOCK_TIMEOUT="soon"',
        'UNKNOWN_SETTING="x"',
        'SPECS_DIR="/abs/specs"',
        'ROOT_CHANGELOG="CHANGES.txt"',
    ])
    def test_schema_violations(self, tmp_path, line):
        (tmp_path / "featuredocs.env").write_text(line + "\n")
        with pytest.raises(ConfigError, match="Invalid featuredocs.env"):
            load_project_config(tmp_path)

    def test_parse_error_is_config_error(self, tmp_path):
        (tmp_path / "featuredocs.env").write_text("SPECS_DIR=$(whoami)\n")
        with pytest.raises(ConfigError):
            load_project_config(tmp_path)

    def test_valid_rollup_modes(self):
        assert set(VALID_ROLLUP_MODES) == {"verbatim", "legacy"}


class TestFindProjectRoot:
    """Test find_project_root."""

    def test_walks_up_to_specs_dir(self, tmp_path):
        (tmp_path / "specs" / "001-test").mkdir(parents=True)
        start = tmp_path / "specs" / "001-test"
        assert find_project_root(start) == tmp_path.resolve()

    def test_config_file_marks_root(self, tmp_path):
        (tmp_path / "featuredocs.env").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == tmp_path.resolve()


class TestFeaturePaths:
    """Test feature_paths."""

    def test_paths(self, tmp_path):
        config = load_project_config(tmp_path)
        paths = feature_paths(config, "001-test")
        assert paths.feature_dir == tmp_path / "specs" / "001-test"
        assert paths.changelog == tmp_path / "specs" / "001-test" / "CHANGELOG.md"
        assert paths.architecture == tmp_path / "specs" / "001-test" / "CLAUDE.md"
        assert paths.root_changelog == tmp_path / "CHANGELOG.md"
