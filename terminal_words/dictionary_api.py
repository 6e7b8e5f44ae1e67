from __future__ import annotations

import urllib.parse
from typing import List, Optional

import requests

from entries import DictionaryEntry, DictionaryError, ParseError, parse_entries
from settings import VERSION, Settings

__all__ = [
    "DictionaryError",
    "NetworkError",
    "ParseError",
    "UsageError",
    "WordNotFoundError",
    "build_lookup_url",
    "fetch_entries_payload",
    "lookup_word",
]

USER_AGENT = f"terminal-words/{VERSION}"


class UsageError(DictionaryError):
    pass


class NetworkError(DictionaryError):
    pass


class WordNotFoundError(DictionaryError):
    def __init__(self, word: str, reason: Optional[str] = None) -> None:
        self.word = word
        self.reason = reason
        message = f"No definitions found for '{word}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


def build_lookup_url(word: str, api_url: str) -> str:
    return f"{api_url}/{urllib.parse.quote(word, safe='')}"


def _not_found_reason(response: requests.Response) -> Optional[str]:
    # dictionaryapi.dev answers 404 with {"title", "message", "resolution"}
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    parts = (data.get("title"), data.get("message"), data.get("resolution"))
    return " | ".join(part for part in parts if isinstance(part, str) and part) or None


def fetch_entries_payload(word: str, settings: Optional[Settings] = None) -> bytes:
    if settings is None:
        settings = Settings()
    url = build_lookup_url(word, settings.api_url)
    try:
        response = requests.get(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=settings.timeout,
        )
    except requests.RequestException as exc:
        raise NetworkError(f"request error: {exc}") from exc

    if response.status_code == 404:
        raise WordNotFoundError(word, _not_found_reason(response))
    if response.status_code != 200:
        raise NetworkError(f"http {response.status_code} from dictionary API")
    return response.content


def lookup_word(word: str, settings: Optional[Settings] = None) -> List[DictionaryEntry]:
    word = word.strip()
    if not word:
        raise UsageError("Word must not be empty.")
    return parse_entries(fetch_entries_payload(word, settings))
