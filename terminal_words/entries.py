from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union


class DictionaryError(Exception):
    """Base class for every failure a lookup can report to the user."""


class ParseError(DictionaryError):
    pass


@dataclass(frozen=True)
class Definition:
    definition: str
    example: Optional[str] = None
    synonyms: Tuple[str, ...] = ()
    antonyms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Meaning:
    part_of_speech: Optional[str]
    definitions: Tuple[Definition, ...]
    synonyms: Tuple[str, ...] = ()
    antonyms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Phonetic:
    text: Optional[str] = None
    audio: Optional[str] = None


@dataclass(frozen=True)
class License:
    name: str
    url: str


@dataclass(frozen=True)
class DictionaryEntry:
    word: str
    phonetic: Optional[str]
    meanings: Tuple[Meaning, ...]
    phonetics: Tuple[Phonetic, ...] = ()
    source_urls: Tuple[str, ...] = ()
    license: Optional[License] = None


def _require_object(value: Any, field: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ParseError(f"{field} must be an object")
    return value


def _require_list(payload: Dict[str, Any], field: str) -> List[Any]:
    value = payload.get(field)
    if not isinstance(value, list):
        raise ParseError(f"{field} must be a list")
    return value


def _require_text(payload: Dict[str, Any], field: str) -> str:
    value = payload.get(field)
    if not isinstance(value, str):
        raise ParseError(f"{field} must be a string")
    return value


def _optional_text(payload: Dict[str, Any], field: str) -> Optional[str]:
    value = payload.get(field)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _text_list(payload: Dict[str, Any], field: str) -> Tuple[str, ...]:
    value = payload.get(field)
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def parse_definition(payload: Any) -> Definition:
    payload = _require_object(payload, "definition")
    return Definition(
        definition=_require_text(payload, "definition"),
        example=_optional_text(payload, "example"),
        synonyms=_text_list(payload, "synonyms"),
        antonyms=_text_list(payload, "antonyms"),
    )


def parse_meaning(payload: Any) -> Meaning:
    payload = _require_object(payload, "meaning")
    return Meaning(
        part_of_speech=_optional_text(payload, "partOfSpeech"),
        definitions=tuple(
            parse_definition(item) for item in _require_list(payload, "definitions")
        ),
        synonyms=_text_list(payload, "synonyms"),
        antonyms=_text_list(payload, "antonyms"),
    )


def parse_phonetics(payload: Dict[str, Any]) -> Tuple[Phonetic, ...]:
    raw_phonetics = payload.get("phonetics")
    if not isinstance(raw_phonetics, list):
        return ()
    return tuple(
        Phonetic(text=_optional_text(item, "text"), audio=_optional_text(item, "audio"))
        for item in raw_phonetics
        if isinstance(item, dict)
    )


def parse_license(payload: Dict[str, Any]) -> Optional[License]:
    raw_license = payload.get("license")
    if not isinstance(raw_license, dict):
        return None
    name = _optional_text(raw_license, "name")
    url = _optional_text(raw_license, "url")
    if name is None or url is None:
        return None
    return License(name=name, url=url)


def parse_entry(payload: Any) -> DictionaryEntry:
    payload = _require_object(payload, "entry")
    return DictionaryEntry(
        word=_require_text(payload, "word"),
        phonetic=_optional_text(payload, "phonetic"),
        meanings=tuple(
            parse_meaning(item) for item in _require_list(payload, "meanings")
        ),
        phonetics=parse_phonetics(payload),
        source_urls=_text_list(payload, "sourceUrls"),
        license=parse_license(payload),
    )


def parse_entries(raw: Union[bytes, str]) -> List[DictionaryEntry]:
    """Decode a dictionary API response body.

    Unknown fields are ignored and absent optional fields become None or an
    empty tuple. Anything that does not match the expected shape raises
    ParseError.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ParseError(f"response is not valid JSON: {exc}") from exc
    if not isinstance(data, list) or not data:
        raise ParseError("response must be a non-empty list of entries")
    return [parse_entry(item) for item in data]
