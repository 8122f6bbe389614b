"""
Engine settings.

Settings come with defaults and can be partially overridden from a dict or a
YAML file. ``EngineSettings.load`` provisions the bundled ``config.yml`` into
the data folder on first run and reads it from there.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any

import yaml

from commandtree.exceptions import SettingsError
from commandtree.provisioning import copy_resource_if_absent

CONFIG_FILE = "config.yml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EngineSettings:
    """Configuration of the command engine.

    Examples:
        # All defaults
        settings = EngineSettings()

        # Partial override from dict
        settings = EngineSettings.from_dict({"plugin_name": "MyServer"})

        # From the data folder, creating config.yml on first run
        settings = EngineSettings.load("plugins/AuthMe")
    """

    plugin_name: str = "AuthMe"
    log_level: str = "INFO"
    suggestion_threshold: float = 0.75
    help_file: str = "help_en.yml"

    def __post_init__(self):
        for name in ("plugin_name", "log_level", "help_file"):
            if not isinstance(getattr(self, name), str):
                raise SettingsError("settings", f"{name} must be a string, got {getattr(self, name)!r}")
        # bool is an int subclass but never a threshold
        if isinstance(self.suggestion_threshold, bool) or not isinstance(
            self.suggestion_threshold, (int, float)
        ):
            raise SettingsError(
                "settings", f"suggestion_threshold must be a number, got {self.suggestion_threshold!r}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise SettingsError("settings", f"unknown log level '{self.log_level}'")
        if not 0.0 <= self.suggestion_threshold <= 1.0:
            raise SettingsError(
                "settings", f"suggestion_threshold must be within [0, 1], got {self.suggestion_threshold}"
            )

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> EngineSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Keys that are not
                   settings fields are ignored.

        Returns:
            EngineSettings instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> EngineSettings:
        """Create from YAML file with partial overrides.

        Raises:
            SettingsError: If the file does not contain a mapping
        """
        path = Path(yaml_path)
        with path.open(encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise SettingsError(str(path), "top level must be a mapping")
        try:
            return cls.from_dict(config)
        except SettingsError as e:
            raise SettingsError(str(path), e.reason) from e

    @classmethod
    def load(cls, data_folder: str | Path) -> EngineSettings:
        """Read ``config.yml`` from ``data_folder``, creating it from the bundled default if absent."""
        return cls.from_yaml(copy_resource_if_absent(CONFIG_FILE, Path(data_folder) / CONFIG_FILE))
