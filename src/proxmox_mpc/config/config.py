"""
Configuration management for proxmox-mpc.

Provides a configuration file at ~/.proxmox-mpc/config.json for console settings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# Default values - single source of truth
DEFAULTS = {
    "prompt": "proxmox-mpc> ",
    "history_size": 1000,
    "persist_history": True,
    "simple": False,
    "load_user_commands": True,
    "log_level": "WARNING",
    "file_logging": False,
}


class Config(BaseModel):
    """Configuration settings for the console.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Prompt settings
    prompt: Optional[str] = Field(
        default=None,
        description="Prompt shown before each input line"
    )
    history_size: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of input lines kept for recall (Up/Down)"
    )
    persist_history: Optional[bool] = Field(
        default=None,
        description="Keep recall history in ~/.proxmox-mpc/prompt_history"
    )
    simple: Optional[bool] = Field(
        default=None,
        description="Use simple line input (no prompt_toolkit)"
    )

    # Command settings
    load_user_commands: Optional[bool] = Field(
        default=None,
        description="Load slash commands from ~/.proxmox-mpc/commands"
    )

    # Logging settings
    log_level: Optional[str] = Field(
        default=None,
        description="Log level for console diagnostics (DEBUG, INFO, WARNING, ERROR)"
    )
    file_logging: Optional[bool] = Field(
        default=None,
        description="Write a per-session log file to ~/.proxmox-mpc/logs"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = Path.home() / ".proxmox-mpc"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is not None:
            self.CONFIG_FILE = Path(config_file)
            self.CONFIG_DIR = self.CONFIG_FILE.parent
        self._config: Optional[Config] = None

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def _read_raw(self) -> dict[str, Any]:
        """Read the config file as a dict, empty if missing or unreadable."""
        if not self.CONFIG_FILE.exists():
            return {}
        try:
            return json.loads(self.CONFIG_FILE.read_text())
        except json.JSONDecodeError:
            return {}

    def load(self, create_if_missing: bool = True) -> Config:
        """Load configuration from file.

        Args:
            create_if_missing: If True, create default config file if it doesn't exist.

        Returns:
            Config object with loaded settings, or defaults if file doesn't exist.
        """
        if not self.CONFIG_FILE.exists():
            if create_if_missing:
                self._create_default_config()
            return Config()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Invalid config file %s (%s), using defaults", self.CONFIG_FILE, e)
            print(f"Warning: Invalid config file ({e}), using defaults")
            return Config()

    def _create_default_config(self) -> None:
        """Write DEFAULTS to a new config file."""
        self._write_raw({"_comment": "proxmox-mpc console configuration file", **DEFAULTS})

    def _write_raw(self, data: dict[str, Any]) -> Path:
        self._ensure_dir()
        self.CONFIG_FILE.write_text(json.dumps(data, indent=2) + "\n")
        return self.CONFIG_FILE

    @staticmethod
    def _check_key(key: str) -> None:
        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

    def save(self, config: Optional[Config] = None) -> Path:
        """Merge the set values of config into the file.

        Keys not managed by Config (such as ``_comment``) are kept.

        Returns:
            Path to the config file.
        """
        if config is not None:
            self._config = config
        elif self._config is None:
            self._config = Config()

        data = self._read_raw()
        data.update(self._config.model_dump(exclude_none=True))
        return self._write_raw(data)

    def set(self, key: str, value: Any) -> None:
        """Validate and store one value.

        Values go through the Config model, so "1000" is accepted for an
        int field.
        """
        self._check_key(key)
        current = self.load(create_if_missing=True)
        self._config = Config.model_validate({**current.model_dump(), key: value})
        self.save()

    def unset(self, key: str) -> None:
        """Clear one value so DEFAULTS applies again."""
        self._check_key(key)
        self._config = self.load(create_if_missing=True).model_copy(update={key: None})

        data = self._read_raw()
        if key in data:
            data[key] = None
            self._write_raw(data)

    def list_settings(self) -> dict[str, Any]:
        """Values that are set and differ from DEFAULTS."""
        return {
            key: value
            for key, value in self.config.model_dump(exclude_none=True).items()
            if DEFAULTS.get(key) != value
        }

    def reset(self) -> None:
        """Delete the config file and forget loaded values."""
        self._config = Config()
        self.CONFIG_FILE.unlink(missing_ok=True)


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager
