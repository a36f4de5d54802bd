#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for CLI configuration discovery and loading."""

import json
import logging
from pathlib import Path

import pytest

from mdsnow.cli.config import (
    CONFIG_ENV_VAR,
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    options_from_config,
)
from mdsnow.exceptions import ConfigError, InvalidOptionsError

TOML_CONFIG = """\
skip_pretty_print = true

[custom_alerts.deploy]
displayName = "DEPLOY"
emoji = "🚀"
"""


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Test loading each supported configuration format."""

    def test_toml(self, tmp_path: Path) -> None:
        """Test a TOML config file."""
        path = tmp_path / ".mdsnow.toml"
        path.write_text(TOML_CONFIG, encoding="utf-8")
        config = load_config_file(path)
        assert config["skip_pretty_print"] is True
        assert config["custom_alerts"]["deploy"]["emoji"] == "🚀"

    def test_yaml(self, tmp_path: Path) -> None:
        """Test a YAML config file."""
        path = tmp_path / ".mdsnow.yaml"
        path.write_text("skipCodeTags: true\ncustomAlerts:\n  note:\n    emoji: X\n", encoding="utf-8")
        assert load_config_file(str(path)) == {"skipCodeTags": True, "customAlerts": {"note": {"emoji": "X"}}}

    def test_json(self, tmp_path: Path) -> None:
        """Test a JSON config file."""
        path = tmp_path / ".mdsnow.json"
        path.write_text(json.dumps({"skip_code_tags": False}), encoding="utf-8")
        assert load_config_file(path) == {"skip_code_tags": False}

    def test_pyproject_section(self, tmp_path: Path) -> None:
        """Test the [tool.mdsnow] table of pyproject.toml."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.mdsnow]\nskip_code_tags = true\n', encoding="utf-8")
        assert load_config_file(path) == {"skip_code_tags": True}

    def test_pyproject_without_section(self, tmp_path: Path) -> None:
        """Test a pyproject.toml with no mdsnow table."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert load_config_file(path) == {}

    def test_empty_yaml_is_empty_config(self, tmp_path: Path) -> None:
        """Test that an empty YAML document loads as no settings."""
        path = tmp_path / ".mdsnow.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test a path that does not exist."""
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(tmp_path / "absent.toml")
        assert exc_info.value.config_path == str(tmp_path / "absent.toml")

    def test_unsupported_extension_raises(self, tmp_path: Path) -> None:
        """Test a file with an unknown extension."""
        path = tmp_path / "config.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unsupported config file format"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "filename, content",
        [
            (".mdsnow.toml", "skip_code_tags = \n"),
            (".mdsnow.yaml", "key: [unclosed\n"),
            (".mdsnow.json", "{not json"),
        ],
    )
    def test_malformed_file_raises(self, tmp_path: Path, filename: str, content: str) -> None:
        """Test that parse errors are wrapped in ConfigError."""
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)
        assert exc_info.value.original_error is not None

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """Test a config whose top level is not a mapping."""
        path = tmp_path / ".mdsnow.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test discovery of config files."""

    def test_found_in_parent_directory(self, tmp_path: Path) -> None:
        """Test walking up from a nested directory."""
        config = tmp_path / "project" / ".mdsnow.yaml"
        nested = tmp_path / "project" / "docs" / "notes"
        nested.mkdir(parents=True)
        config.write_text("skipCodeTags: true\n", encoding="utf-8")
        assert find_config_in_parents(nested) == config.resolve()

    def test_toml_preferred_over_json(self, tmp_path: Path) -> None:
        """Test discovery priority within one directory."""
        (tmp_path / ".mdsnow.json").write_text("{}", encoding="utf-8")
        (tmp_path / ".mdsnow.toml").write_text("", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == (tmp_path / ".mdsnow.toml").resolve()

    def test_pyproject_with_section_found(self, tmp_path: Path) -> None:
        """Test that a pyproject.toml with a [tool.mdsnow] table is used."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.mdsnow]\nskip_code_tags = true\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == path.resolve()

    def test_pyproject_without_section_skipped(self, tmp_path: Path) -> None:
        """Test that an unrelated pyproject.toml is not treated as config."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert find_config_in_parents(tmp_path) != path.resolve()

    def test_broken_pyproject_skipped(self, tmp_path: Path) -> None:
        """Test that an unparsable pyproject.toml does not stop discovery."""
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.mdsnow\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) != path.resolve()

    def test_home_directory_fallback(self, isolated_cwd: Path) -> None:
        """Test that the home directory is searched last."""
        home_config = Path.home() / ".mdsnow.json"
        home_config.write_text("{}", encoding="utf-8")
        assert discover_config_file() == home_config

    def test_nothing_found(self, isolated_cwd: Path) -> None:
        """Test discovery with no config anywhere."""
        assert discover_config_file() is None


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Test which config source wins."""

    def test_explicit_path_wins(self, isolated_cwd: Path, monkeypatch) -> None:
        """Test that --config beats the environment and discovery."""
        explicit = isolated_cwd / "explicit.json"
        explicit.write_text('{"skip_code_tags": true}', encoding="utf-8")
        env_config = isolated_cwd / "env.json"
        env_config.write_text('{"skip_pretty_print": true}', encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_config))
        (isolated_cwd / ".mdsnow.json").write_text('{"customAlerts": {}}', encoding="utf-8")

        assert load_config_with_priority(explicit_path=str(explicit)) == {"skip_code_tags": True}

    def test_environment_beats_discovery(self, isolated_cwd: Path, monkeypatch) -> None:
        """Test that the environment variable beats discovery."""
        env_config = isolated_cwd / "env.json"
        env_config.write_text('{"skip_pretty_print": true}', encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_config))
        (isolated_cwd / ".mdsnow.json").write_text('{"customAlerts": {}}', encoding="utf-8")

        assert load_config_with_priority() == {"skip_pretty_print": True}

    def test_discovered_file_used(self, isolated_cwd: Path) -> None:
        """Test discovery when nothing is given explicitly."""
        (isolated_cwd / ".mdsnow.json").write_text('{"customAlerts": {}}', encoding="utf-8")
        assert load_config_with_priority() == {"customAlerts": {}}

    def test_discovery_disabled(self, isolated_cwd: Path) -> None:
        """Test that discovery can be turned off."""
        (isolated_cwd / ".mdsnow.json").write_text('{"customAlerts": {}}', encoding="utf-8")
        assert load_config_with_priority(discover=False) == {}


@pytest.mark.unit
@pytest.mark.cli
class TestOptionsFromConfig:
    """Test building ConversionOptions from config values."""

    def test_snake_and_camel_case_keys(self) -> None:
        """Test both key spellings."""
        options = options_from_config({"skipCodeTags": True, "skip_pretty_print": True, "customAlerts": {"tip": {}}})
        assert options.skip_code_tags is True
        assert options.skip_pretty_print is True
        assert "tip" in options.custom_alerts

    def test_unknown_key_warns(self, caplog) -> None:
        """Test that unknown keys are ignored with a warning."""
        with caplog.at_level(logging.WARNING, logger="mdsnow.cli.config"):
            options = options_from_config({"theme": "dark"})
        assert options.skip_code_tags is False
        assert "Ignoring unknown config key: theme" in caplog.text

    def test_bad_value_raises(self) -> None:
        """Test that a known key with a bad value is rejected."""
        with pytest.raises(InvalidOptionsError):
            options_from_config({"custom_alerts": "oops"})
