# tests/test_config.py
"""Tests for configuration loading and saving."""
from pathlib import Path

import pytest

from emilio.config import ConfigManager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path / "emilio" / "config.toml"


def test_missing_file_uses_defaults_without_writing(config_file):
    manager = ConfigManager(config_file=config_file)
    manager.load_config()

    assert manager.config.api.gemini_api_key is None
    assert manager.config.user.default_frontend == "React + Tailwind"
    assert manager.config.user.default_backend == "None"
    assert manager.config.preview.port == 8765
    assert not config_file.exists()


def test_save_and_reload(config_file):
    manager = ConfigManager(config_file=config_file)
    manager.config.api.gemini_api_key = "secret"
    manager.config.user.default_frontend = "Svelte + Tailwind"
    manager.config.user.output_dir = Path("/tmp/exports")
    manager.config.user.system_prompt = "Be brief."
    manager.config.preview.port = 9000
    manager.config.debug = True
    saved = manager.save_config()

    assert saved == config_file
    reloaded = ConfigManager(config_file=config_file)
    reloaded.load_config()
    assert reloaded.config.api.gemini_api_key == "secret"
    assert reloaded.config.user.default_frontend == "Svelte + Tailwind"
    assert reloaded.config.user.output_dir == Path("/tmp/exports")
    assert reloaded.config.user.system_prompt == "Be brief."
    assert reloaded.config.preview.port == 9000
    assert reloaded.config.debug is True


def test_unset_values_are_not_written(config_file):
    manager = ConfigManager(config_file=config_file)
    manager.save_config()

    text = config_file.read_text()
    assert "system_prompt" not in text
    assert "gemini_api_key" not in text


def test_invalid_toml_falls_back_to_defaults(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[user\ndefault_frontend = ")

    manager = ConfigManager(config_file=config_file)
    manager.load_config()

    assert manager.config.user.default_frontend == "React + Tailwind"


def test_invalid_values_fall_back_to_defaults(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text('[preview]\nport = "not a port"\n')

    manager = ConfigManager(config_file=config_file)
    manager.load_config()

    assert manager.config.preview.port == 8765


def test_environment_key_wins(config_file, monkeypatch):
    config_file.parent.mkdir(parents=True)
    config_file.write_text('[api]\ngemini_api_key = "from_file"\n')
    monkeypatch.setenv("GEMINI_API_KEY", "from_env")

    manager = ConfigManager(config_file=config_file)
    manager.load_config()

    assert manager.config.api.gemini_api_key == "from_env"
