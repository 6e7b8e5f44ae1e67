from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

VERSION = "0.1.0"
DEFAULT_API_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "terminal_words" / "config.json"


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: Optional[float] = None
    color: bool = True


def get_config_file() -> Path:
    config_path = os.environ.get("TERMINAL_WORDS_CONFIG")
    if config_path:
        return Path(config_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(config_file: Path) -> Dict[str, Any]:
    if not config_file.exists():
        return {}
    try:
        text = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ValueError(f"{config_file} could not be read: {exc}") from exc
    try:
        config = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ValueError(f"{config_file} is not valid JSON: {exc}") from exc
    if not isinstance(config, dict):
        raise ValueError(f"{config_file} must contain a JSON object.")
    return config


def _parse_timeout(value: Any, source: str) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"{source} must be a number of seconds")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{source} must be a number of seconds") from exc
    if timeout <= 0:
        raise ValueError(f"{source} must be positive")
    return timeout


def _parse_api_url(value: Any, source: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{source} must be a non-empty string")
    return value.strip().rstrip("/")


def load_settings(config_file: Optional[Path] = None) -> Settings:
    """Build settings from the environment, then the config file, then defaults.

    Raises ValueError when either source holds a value of the wrong type.
    """
    if config_file is None:
        config_file = get_config_file()
    config = load_config_file(config_file)

    api_url = os.environ.get("TERMINAL_WORDS_API_URL")
    if api_url:
        api_url = _parse_api_url(api_url, "TERMINAL_WORDS_API_URL")
    elif "api_url" in config:
        api_url = _parse_api_url(config["api_url"], "api_url")
    else:
        api_url = DEFAULT_API_URL

    raw_timeout = os.environ.get("TERMINAL_WORDS_TIMEOUT")
    if raw_timeout:
        timeout = _parse_timeout(raw_timeout, "TERMINAL_WORDS_TIMEOUT")
    else:
        timeout = _parse_timeout(config.get("timeout"), "timeout")

    color = config.get("color", True)
    if not isinstance(color, bool):
        raise ValueError("color must be true or false")
    if os.environ.get("NO_COLOR"):
        color = False

    return Settings(api_url=api_url, timeout=timeout, color=color)
