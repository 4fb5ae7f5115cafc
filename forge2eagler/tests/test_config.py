"""Tests for converter settings loading."""

import pytest
from pydantic import ValidationError

from forge2eagler.core.config import ConverterSettings, get_config_path, load_settings
from forge2eagler.core.config.config_loader import CONFIG_ENV_VAR


class TestConverterSettings:
    def test_defaults(self):
        settings = ConverterSettings()
        assert settings.accumulate_required_modules is True
        assert settings.qualified_name_order == "table"
        assert settings.guard_objects == ["ModAPI.minecraft", "ModAPI.player"]
        assert settings.log_level == "INFO"

    def test_invalid_order(self):
        with pytest.raises(ValidationError):
            ConverterSettings(qualified_name_order="random")

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            ConverterSettings(log_level="info")


class TestLoadSettings:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text(
            "converter:\n"
            "  accumulate_required_modules: false\n"
            "  qualified_name_order: longest_first\n"
            "  guard_objects: []\n",
            encoding="utf-8",
        )
        settings = load_settings(path)
        assert settings.accumulate_required_modules is False
        assert settings.qualified_name_order == "longest_first"
        assert settings.guard_objects == []
        assert settings.log_level == "INFO"

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_settings(tmp_path / "absent.yaml") == ConverterSettings()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_settings(path) == ConverterSettings()

    def test_invalid_value_raises(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("converter:\n  qualified_name_order: shortest\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_settings(path)

    def test_env_var(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("converter:\n  log_level: DEBUG\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_settings().log_level == "DEBUG"

    def test_project_config(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert (get_config_path() / "forge2eagler.yaml").exists()
        assert load_settings() == ConverterSettings()

    def test_invalid_log_level_raises(self, tmp_path):
        path = tmp_path / "level.yaml"
        path.write_text("converter:\n  log_level: VERBOSE\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_settings(path)
