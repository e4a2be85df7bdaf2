"""Configuration for svg-fixup.

Settings come from a YAML file:

    disabled_passes:
      - external-hrefs
    verify: true
    log_level: INFO
    suffix: _fixed
    jobs: 4

The file is looked up at the path given explicitly, then $SVG_FIXUP_CONFIG,
then ~/.config/svg-fixup/config.yaml.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from svg_fixup.exceptions import ConfigError
from svg_fixup.fixup import PASS_NAMES

ENV_VAR = "SVG_FIXUP_CONFIG"
DEFAULT_PATH = Path.home() / ".config" / "svg-fixup" / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Settings shared by the API facade and the CLI."""

    disabled_passes: list[str] = field(default_factory=list)
    verify: bool = False
    log_level: str = "WARNING"
    suffix: str = "_fixed"
    jobs: int = 4

    def __post_init__(self) -> None:
        unknown = sorted(set(self.disabled_passes).difference(PASS_NAMES))
        if unknown:
            raise ConfigError(
                f"Unknown pass in disabled_passes: {', '.join(unknown)}",
                details={"known": list(PASS_NAMES)},
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {self.log_level}")
        if self.jobs < 1:
            raise ConfigError(f"jobs must be at least 1, got {self.jobs}")

    @property
    def enabled_passes(self) -> list[str]:
        return [name for name in PASS_NAMES if name not in self.disabled_passes]

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: Path | None = None) -> Config:
        """Build a Config from parsed YAML, checking keys and types."""
        expected = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data).difference(expected))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", path=path)

        types = {
            "disabled_passes": list,
            "verify": bool,
            "log_level": str,
            "suffix": str,
            "jobs": int,
        }
        for key, value in data.items():
            expected_type = types[key]
            # bool is a subclass of int; "jobs: true" is still a mistake
            if not isinstance(value, expected_type) or (
                expected_type is int and isinstance(value, bool)
            ):
                raise ConfigError(
                    f"'{key}' must be of type {expected_type.__name__}",
                    path=path,
                    details={"value": value},
                )

        try:
            return cls(**data)
        except ConfigError as e:
            e.path = path
            raise

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration, falling back to defaults when no file exists.

        An explicitly requested file (argument or environment variable) must
        exist; the default location is optional.
        """
        explicit = path is not None or ENV_VAR in os.environ
        if path is None:
            path = os.environ.get(ENV_VAR, DEFAULT_PATH)
        config_path = Path(path).expanduser()

        if not config_path.exists():
            if explicit:
                raise ConfigError("Config file not found", path=config_path)
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config: {e}", path=config_path) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping", path=config_path)
        return cls.from_dict(data, path=config_path)
