"""Tests for svg_fixup.config YAML loading and validation."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from svg_fixup.config import Config
from svg_fixup.exceptions import ConfigError
from svg_fixup.fixup import PASS_NAMES


class TestConfigDefaults:
    def test_defaults(self) -> None:
        """A bare Config enables every pass."""
        config = Config()
        assert config.disabled_passes == []
        assert config.enabled_passes == list(PASS_NAMES)
        assert config.verify is False
        assert config.log_level == "WARNING"
        assert config.suffix == "_fixed"
        assert config.jobs == 4

    def test_missing_default_file_gives_defaults(self) -> None:
        """No file at the default location is not an error."""
        assert Config.load() == Config()

    def test_log_level_normalized(self) -> None:
        """Log levels are case-insensitive."""
        assert Config(log_level="debug").log_level == "DEBUG"

    def test_disabled_passes_removed_from_enabled(self) -> None:
        """Disabled passes drop out of the pipeline, order is kept."""
        config = Config(disabled_passes=["scripts", "reserved-namespaces"])
        assert "scripts" not in config.enabled_passes
        assert config.enabled_passes[0] == "svg-prefixes"


class TestConfigLoad:
    """Tests for reading configuration files."""

    def test_load_full_config(self, tmp_path: Path) -> None:
        """All keys are read from YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            dedent("""
            disabled_passes:
              - external-hrefs
            verify: true
            log_level: INFO
            suffix: _clean
            jobs: 8
        """)
        )

        config = Config.load(config_file)

        assert config.disabled_passes == ["external-hrefs"]
        assert config.verify is True
        assert config.log_level == "INFO"
        assert config.suffix == "_clean"
        assert config.jobs == 8

    def test_load_from_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """SVG_FIXUP_CONFIG points at the file when no path is passed."""
        config_file = tmp_path / "env.yaml"
        config_file.write_text("verify: true\n")
        monkeypatch.setenv("SVG_FIXUP_CONFIG", str(config_file))

        assert Config.load().verify is True

    def test_load_default_location(self, isolated_config: Path) -> None:
        """The default file is used when present."""
        (isolated_config / "config.yaml").write_text("jobs: 2\n")
        assert Config.load().jobs == 2

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """An empty YAML document means defaults."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert Config.load(config_file) == Config()

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        """A requested file that does not exist is an error."""
        with pytest.raises(ConfigError, match="not found") as exc_info:
            Config.load(tmp_path / "missing.yaml")
        assert exc_info.value.path == tmp_path / "missing.yaml"

    def test_environment_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A file named by the environment must exist too."""
        monkeypatch.setenv("SVG_FIXUP_CONFIG", str(tmp_path / "missing.yaml"))
        with pytest.raises(ConfigError):
            Config.load()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparseable YAML is reported as a ConfigError."""
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("verify: [unclosed\n")
        with pytest.raises(ConfigError, match="Cannot read config"):
            Config.load(config_file)

    def test_root_must_be_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- verify\n")
        with pytest.raises(ConfigError, match="mapping"):
            Config.load(config_file)


class TestConfigValidation:
    """Tests for rejecting invalid settings."""

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="Unknown config keys: colour"):
            Config.from_dict({"colour": "red"})

    @pytest.mark.parametrize(
        "data",
        [
            {"verify": "yes"},
            {"jobs": "4"},
            {"jobs": True},
            {"disabled_passes": "scripts"},
            {"suffix": 1},
        ],
    )
    def test_wrong_types(self, data: dict) -> None:
        """Values of the wrong type are rejected."""
        with pytest.raises(ConfigError, match="must be of type"):
            Config.from_dict(data)

    def test_unknown_pass(self, tmp_path: Path) -> None:
        """Disabling a pass that does not exist is an error carrying the file path."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("disabled_passes: [no-such-pass]\n")
        with pytest.raises(ConfigError, match="no-such-pass") as exc_info:
            Config.load(config_file)
        assert exc_info.value.path == config_file

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigError, match="log_level"):
            Config(log_level="LOUD")

    def test_jobs_must_be_positive(self) -> None:
        with pytest.raises(ConfigError, match="jobs"):
            Config(jobs=0)
