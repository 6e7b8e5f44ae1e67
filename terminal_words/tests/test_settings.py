from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BASE_DIR))

import settings as settings_module  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TERMINAL_WORDS_API_URL",
        "TERMINAL_WORDS_TIMEOUT",
        "TERMINAL_WORDS_CONFIG",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_config_file_missing(tmp_path):
    settings = settings_module.load_settings(tmp_path / "config.json")

    assert settings == settings_module.Settings()
    assert settings.api_url == settings_module.DEFAULT_API_URL
    assert settings.timeout is None
    assert settings.color is True


def test_get_config_file_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("TERMINAL_WORDS_CONFIG", str(tmp_path / "words.json"))

    assert settings_module.get_config_file() == tmp_path / "words.json"


def test_get_config_file_default():
    assert settings_module.get_config_file() == settings_module.DEFAULT_CONFIG_FILE


def test_values_from_config_file(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({"api_url": "https://mirror.test/en/", "timeout": 4, "color": False}),
        encoding="utf-8",
    )

    settings = settings_module.load_settings(config_file)

    assert settings.api_url == "https://mirror.test/en"
    assert settings.timeout == 4.0
    assert settings.color is False


def test_environment_overrides_config_file(tmp_path, monkeypatch):
    config_file = tmp_path / "config.json"
    config_file.write_text(
        json.dumps({"api_url": "https://mirror.test/en", "timeout": 4}),
        encoding="utf-8",
    )
    monkeypatch.setenv("TERMINAL_WORDS_API_URL", "https://other.test/en")
    monkeypatch.setenv("TERMINAL_WORDS_TIMEOUT", "1.5")
    monkeypatch.setenv("NO_COLOR", "1")

    settings = settings_module.load_settings(config_file)

    assert settings.api_url == "https://other.test/en"
    assert settings.timeout == 1.5
    assert settings.color is False


def test_invalid_json_raises(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid JSON"):
        settings_module.load_settings(config_file)


def test_non_object_config_raises(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError, match="JSON object"):
        settings_module.load_settings(config_file)


@pytest.mark.parametrize(
    "config, message",
    [
        ({"timeout": "soon"}, "timeout must be a number"),
        ({"timeout": -1}, "timeout must be positive"),
        ({"timeout": True}, "timeout must be a number"),
        ({"api_url": ""}, "api_url must be a non-empty string"),
        ({"color": "yes"}, "color must be true or false"),
    ],
)
def test_invalid_values_raise(tmp_path, config, message):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(config), encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        settings_module.load_settings(config_file)


def test_unreadable_config_path_raises(tmp_path):
    with pytest.raises(ValueError, match="could not be read"):
        settings_module.load_settings(tmp_path)
