"""
Test suite for ConfigManager with dependency injection.
"""
import json
import pytest

from config_manager import DEFAULT_CONFIG, ConfigManager, config


class TestConfigManager:
    """Tests for the ConfigManager with dependency injection."""

    def test_init_with_custom_path(self, test_config_file):
        cm = ConfigManager(cfg_path=test_config_file, exit_on_error=False)
        assert cm.cfg_path == test_config_file
        assert cm.viewport["maxZoom"] == 8.0
        assert cm.ui["windowWidth"] == 400

    def test_viewport_accessors(self, test_config_manager):
        assert test_config_manager.get_viewport_setting("zoomStep") == 1.25
        assert test_config_manager.get_viewport_setting("missing", 3) == 3
        assert test_config_manager.get_viewport_config()["smoothing"] is True

    def test_get_color(self, test_config_manager):
        assert test_config_manager.get_color("background") == "#101010"
        assert test_config_manager.get_color("nonexistent") == "#000000"
        assert test_config_manager.get_color("nonexistent", "#FF0000") == "#FF0000"

    def test_get_string(self, test_config_manager):
        assert test_config_manager.get_string("app", "name") == "PictureFrame Test"
        assert test_config_manager.get_string("app", "nonexistent") == "nonexistent"
        assert test_config_manager.get_string("app", "nonexistent", "Default") == "Default"

    def test_get_nested_string(self, test_config_manager):
        assert test_config_manager.get_nested_string("app.windowTitle") == "Test - {filename}"
        assert test_config_manager.get_nested_string("app.name.deeper") == "app.name.deeper"
        assert test_config_manager.get_nested_string("nope", "Fallback") == "Fallback"

    def test_logging_and_set_setting(self, test_config_manager):
        assert test_config_manager.get_logging_config()["level"] == "DEBUG"
        assert test_config_manager.get_logging_setting("console") is False
        assert test_config_manager.get_logging_setting("file", "x.log") == "x.log"

        test_config_manager.set_setting("viewport", "panStep", 99)
        assert test_config_manager.get_viewport_setting("panStep") == 99

        test_config_manager.set_setting("logging", "level", "ERROR")
        assert test_config_manager.get_logging_setting("level") == "ERROR"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(RuntimeError):
            ConfigManager(cfg_path=tmp_path / "missing.json", exit_on_error=False)

    def test_invalid_json_raises(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        with pytest.raises(RuntimeError):
            ConfigManager(cfg_path=bad, exit_on_error=False)

    def test_missing_section_raises(self, tmp_path, test_config_data):
        del test_config_data["viewport"]
        cfg = tmp_path / "partial.json"
        cfg.write_text(json.dumps(test_config_data))
        with pytest.raises(KeyError):
            ConfigManager(cfg_path=cfg, exit_on_error=False)

    def test_missing_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            ConfigManager(cfg_path=tmp_path / "missing.json", exit_on_error=True)


def test_default_config_has_viewport_defaults():
    assert config.get_viewport_setting("maxZoom") == 20.0
    assert config.get_viewport_setting("zoomStep") == 1.25
    assert config.get_viewport_setting("fitOnLoad") is True


def test_missing_default_file_uses_builtin_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(ConfigManager, "_default_config_path",
                        lambda self: tmp_path / "config" / "config.json")
    cm = ConfigManager(exit_on_error=True)
    assert cm.get_viewport_config() == DEFAULT_CONFIG["viewport"]
    assert cm.get_color("background") == "#202020"
    assert cm.get_string("app", "name") == "PictureFrame"
    assert cm.get_logging_setting("raiseOnError") is False

    cm.set_setting("viewport", "maxZoom", 4.0)
    assert DEFAULT_CONFIG["viewport"]["maxZoom"] == 20.0


def test_builtin_defaults_match_shipped_config(pf_paths):
    with open(pf_paths["config"] / "config.json") as f:
        shipped = json.load(f)
    assert shipped == DEFAULT_CONFIG
