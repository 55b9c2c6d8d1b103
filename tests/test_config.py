"""Tests for configuration management."""

import json

import pytest
from pydantic import ValidationError

from focustimer_cli.config import ConfigManager, get_config_manager
from focustimer_cli.models.config_models import AppConfig


def test_default_config():
    """Test default configuration."""
    config = AppConfig()
    assert config.timer.technique == "classic"
    assert config.timer.auto_start_breaks is True
    assert config.notifications.sound is True
    assert config.notifications.desktop is True
    assert config.ui.theme == "seoul-sunrise"


def test_config_manager_uses_config_dir(isolate_dirs):
    manager = ConfigManager(profile="test")

    assert manager.config_file == isolate_dirs / "config" / "test.json"
    assert manager.config_dir.exists()


def test_missing_file_gives_defaults():
    assert ConfigManager().config == AppConfig()


def test_config_save_load():
    """Test saving and loading configuration."""
    manager = ConfigManager(profile="test")
    manager.set("timer.technique", "90_30")
    assert manager.get("timer.technique") == "90_30"

    # A new manager with the same profile reads the saved value
    assert ConfigManager(profile="test").get("timer.technique") == "90_30"


def test_profiles_are_separate():
    ConfigManager(profile="work").set("ui.theme", "golden-hour")

    assert ConfigManager(profile="home").get("ui.theme") == "seoul-sunrise"


def test_corrupted_config_falls_back_to_defaults():
    manager = ConfigManager()
    manager.config_file.write_text("{not json")

    assert manager.load_config() == AppConfig()


def test_invalid_values_fall_back_to_defaults():
    manager = ConfigManager()
    manager.config_file.write_text(json.dumps({"timer": {"technique": "tomato"}}))

    assert manager.load_config().timer.technique == "classic"


def test_get_unknown_key_returns_none():
    manager = ConfigManager()

    assert manager.get("timer.volume") is None
    assert manager.get("timer.technique.extra") is None


def test_set_unknown_key_raises():
    with pytest.raises(KeyError):
        ConfigManager().set("timer.volume", 3)


def test_set_invalid_value_keeps_config():
    manager = ConfigManager()

    with pytest.raises(ValidationError):
        manager.set("timer.technique", "tomato")

    assert manager.get("timer.technique") == "classic"


def test_reset_single_key():
    manager = ConfigManager()
    manager.set("notifications.sound", False)

    manager.reset("notifications.sound")

    assert manager.get("notifications.sound") is True


def test_reset_all():
    manager = ConfigManager()
    manager.set("timer.auto_start_breaks", False)
    manager.set("ui.theme", "arctic-glow")

    manager.reset()

    assert manager.config == AppConfig()
    saved = json.loads(manager.config_file.read_text())
    assert saved["ui"]["theme"] == "seoul-sunrise"


def test_reset_unknown_key_raises():
    with pytest.raises(KeyError):
        ConfigManager().reset("timer.volume")


def test_get_config_manager_is_cached_per_profile():
    first = get_config_manager()

    assert get_config_manager() is first
    assert get_config_manager("other") is not first
    assert get_config_manager("other").profile == "other"
