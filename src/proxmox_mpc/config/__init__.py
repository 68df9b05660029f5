"""Configuration management for proxmox-mpc."""

from proxmox_mpc.config.config import (
    DEFAULTS,
    Config,
    ConfigManager,
    get_config_manager,
)

__all__ = [
    "DEFAULTS",
    "Config",
    "ConfigManager",
    "get_config_manager",
]
