"""
Settings loader for the wss tool.

This module provides the ConfigLoader class for loading and validating
tool settings from YAML files.
"""
import os
from pathlib import Path
from typing import Optional

import yaml

from wss.config.tool_settings import ToolSettings
from wss.exceptions import ConfigurationError
from wss.util.log_config import resolve_level

CONFIG_DIR_ENV = "WSS_CONFIG_DIR"
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config_yaml"

KNOWN_KEYS = {"proc_root", "log_level", "log_file", "check_target"}


def default_config_dir() -> Path:
    override = os.environ.get(CONFIG_DIR_ENV)
    return Path(override) if override else DEFAULT_CONFIG_DIR


class ConfigLoader:

    def __init__(self, config_path: Optional[Path] = None, env: Optional[str] = None):
        self.config_path = config_path if config_path is not None else default_config_dir()
        self.env = env
        self.settings = self._load_config()

    def _read_yaml(self, path: Path) -> dict:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(f"can't read config file {path}: {e.strerror or e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid YAML in {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a mapping, got {type(data).__name__}")
        return data

    def _load_config(self) -> ToolSettings:
        """
        Load and parse tool settings from YAML.
        Supports environment-specific overrides via config_<env>.yaml

        A missing base config.yaml means built-in defaults; a missing
        environment file is an error since it was asked for explicitly.

        Returns:
            ToolSettings: Parsed settings instance
        """
        data = {}
        base_config_file = self.config_path / "config.yaml"
        if base_config_file.exists():
            data = self._read_yaml(base_config_file)

        if self.env:
            env_config_file = self.config_path / f"config_{self.env}.yaml"
            # dict.update() will overwrite existing keys
            data.update(self._read_yaml(env_config_file))

        unknown = set(data) - KNOWN_KEYS
        if unknown:
            raise ConfigurationError(f"unknown config keys: {', '.join(sorted(unknown))}")

        settings = ToolSettings()
        if data.get("proc_root"):
            settings.proc_root = Path(data["proc_root"])
        if data.get("log_level"):
            settings.log_level = str(data["log_level"]).upper()
            try:
                resolve_level(settings.log_level)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e
        if data.get("log_file"):
            settings.log_file = Path(data["log_file"]).expanduser()
        if "check_target" in data:
            if not isinstance(data["check_target"], bool):
                raise ConfigurationError("check_target must be true or false")
            settings.check_target = data["check_target"]

        return settings
