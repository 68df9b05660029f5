#!/usr/bin/env python3
"""
Tests for configuration management module.
"""

import json
import pytest
from unittest.mock import patch

from proxmox_mpc.config import DEFAULTS, Config, ConfigManager, get_config_manager


# ============================================================================
# Config Model Tests
# ============================================================================

class TestConfig:
    """Tests for Config model."""

    def test_create_empty_config(self):
        """Test creating config with all defaults."""
        cfg = Config()
        assert cfg.prompt is None
        assert cfg.history_size is None
        assert cfg.simple is None
        assert cfg.load_user_commands is None

    def test_get_falls_back_to_defaults(self):
        """Test unset values come from DEFAULTS."""
        cfg = Config()
        assert cfg.get("prompt") == "proxmox-mpc> "
        assert cfg.get("history_size") == DEFAULTS["history_size"]

    def test_get_with_value(self):
        cfg = Config(prompt="lab> ", simple=True)
        assert cfg.get("prompt") == "lab> "
        assert cfg.get("simple") is True

    def test_false_value_is_not_replaced(self):
        """Test False is a real value, not a missing one."""
        cfg = Config(load_user_commands=False)
        assert cfg.get("load_user_commands") is False

    def test_get_unknown_key(self):
        cfg = Config()
        assert cfg.get("unknown_key") is None
        assert cfg.get("unknown_key", "default") == "default"

    def test_history_size_must_be_positive(self):
        with pytest.raises(ValueError):
            Config(history_size=0)

    def test_ignores_comment_field(self):
        cfg = Config.model_validate({"_comment": "hi", "prompt": "x> "})
        assert cfg.prompt == "x> "


# ============================================================================
# ConfigManager Tests
# ============================================================================

class TestConfigManager:
    """Tests for ConfigManager."""

    @pytest.fixture
    def temp_config_dir(self, tmp_path):
        """Create temporary config directory."""
        config_dir = tmp_path / ".proxmox-mpc"
        config_dir.mkdir()
        return config_dir

    def test_load_nonexistent_config(self, temp_config_dir):
        """Test loading config when file doesn't exist (without creating)."""
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                cfg = ConfigManager().load(create_if_missing=False)
                assert cfg.prompt is None
                assert not config_file.exists()

    def test_load_creates_default_config(self, temp_config_dir):
        """Test that load writes the defaults when the file is missing."""
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                ConfigManager().load()
                data = json.loads(config_file.read_text())
                assert data["prompt"] == DEFAULTS["prompt"]
                assert "_comment" in data

    def test_explicit_config_file(self, tmp_path):
        """Test a config file path passed to the constructor."""
        config_file = tmp_path / "custom" / "console.json"
        mgr = ConfigManager(config_file=config_file)
        mgr.set("prompt", "pve> ")
        assert json.loads(config_file.read_text())["prompt"] == "pve> "

    def test_save_and_load_config(self, temp_config_dir):
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                ConfigManager().save(Config(history_size=50, simple=True))

                loaded = ConfigManager().load()
                assert loaded.history_size == 50
                assert loaded.simple is True

    def test_save_only_non_none_values(self, temp_config_dir):
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                ConfigManager().save(Config(history_size=50))
                assert json.loads(config_file.read_text()) == {"history_size": 50}

    def test_set_validates_and_coerces(self, temp_config_dir):
        """Test string values from the command line are coerced."""
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                mgr = ConfigManager()
                mgr.set("history_size", "250")
                assert ConfigManager().load().history_size == 250

    def test_set_invalid_value(self, temp_config_dir):
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', temp_config_dir / "config.json"):
                with pytest.raises(ValueError):
                    ConfigManager().set("history_size", "lots")

    def test_set_preserves_other_values(self, temp_config_dir):
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                ConfigManager().set("prompt", "lab> ")
                ConfigManager().set("simple", True)

                final = ConfigManager().load(create_if_missing=False)
                assert final.prompt == "lab> "
                assert final.simple is True

    def test_set_unknown_key_raises(self, temp_config_dir):
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', temp_config_dir / "config.json"):
                with pytest.raises(ValueError, match="Unknown config key"):
                    ConfigManager().set("unknown_key", "value")

    def test_unset_value(self, temp_config_dir):
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                mgr = ConfigManager()
                mgr.set("prompt", "lab> ")
                mgr.set("simple", True)
                mgr.unset("prompt")

                loaded = ConfigManager().load()
                assert loaded.prompt is None
                assert loaded.get("prompt") == DEFAULTS["prompt"]
                assert loaded.simple is True

    def test_list_settings(self, temp_config_dir):
        """Test only values that differ from defaults are listed."""
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                mgr = ConfigManager()
                mgr.set("history_size", 20)
                mgr.set("log_level", "DEBUG")
                assert mgr.list_settings() == {"history_size": 20, "log_level": "DEBUG"}

    def test_reset(self, temp_config_dir):
        config_file = temp_config_dir / "config.json"
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                mgr = ConfigManager()
                mgr.set("prompt", "lab> ")
                mgr.reset()
                assert not config_file.exists()
                assert mgr.load().prompt is None

    def test_load_invalid_json(self, temp_config_dir, capsys):
        """Test loading invalid JSON returns defaults."""
        config_file = temp_config_dir / "config.json"
        config_file.write_text("not valid json")
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                cfg = ConfigManager().load()
                assert cfg.prompt is None
                assert "Invalid config file" in capsys.readouterr().out

    def test_load_invalid_schema(self, temp_config_dir):
        config_file = temp_config_dir / "config.json"
        config_file.write_text('{"history_size": "not a number"}')
        with patch.object(ConfigManager, 'CONFIG_DIR', temp_config_dir):
            with patch.object(ConfigManager, 'CONFIG_FILE', config_file):
                assert ConfigManager().load().history_size is None


# ============================================================================
# Singleton Tests
# ============================================================================

class TestSingleton:
    """Tests for singleton functions."""

    @pytest.fixture(autouse=True)
    def reset_singleton(self):
        import proxmox_mpc.config.config as config_module

        config_module._manager = None
        yield
        config_module._manager = None

    def test_get_config_manager_returns_same_instance(self, tmp_path):
        with patch.object(ConfigManager, 'CONFIG_DIR', tmp_path):
            with patch.object(ConfigManager, 'CONFIG_FILE', tmp_path / "config.json"):
                assert get_config_manager() is get_config_manager()
