from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from termcolor import colored

from entries import Definition, DictionaryEntry, Meaning

DEFINITION_INDENT = "  "
DETAIL_INDENT = "     "


def paint(
    text: str,
    color: Optional[str] = None,
    attrs: Optional[Iterable[str]] = None,
    enabled: bool = True,
) -> str:
    if not enabled:
        return text
    # Whether to color comes from settings, not from isatty.
    return colored(text, color, attrs=attrs, force_color=True)


def _labelled(
    label: str,
    value: str,
    label_color: str,
    value_color: Optional[str] = None,
    label_attrs: Optional[Iterable[str]] = None,
    value_attrs: Optional[Iterable[str]] = None,
    enabled: bool = True,
) -> str:
    painted_label = paint(label, label_color, label_attrs, enabled)
    painted_value = paint(value, value_color, value_attrs, enabled) if value_color else value
    return f"{painted_label} {painted_value}"


def _header_lines(entry: DictionaryEntry, color: bool) -> List[str]:
    lines = [
        "",
        _labelled(
            "Word:",
            entry.word,
            "light_green",
            "white",
            label_attrs=["bold"],
            value_attrs=["bold"],
            enabled=color,
        ),
    ]
    if entry.phonetic:
        lines.append(
            _labelled("Phonetic:", entry.phonetic, "light_blue", "light_yellow", enabled=color)
        )
    for phonetic in entry.phonetics:
        if phonetic.text:
            lines.append(
                _labelled(
                    "Pronunciation:", phonetic.text, "light_blue", "light_yellow", enabled=color
                )
            )
    lines.append("")
    return lines


def _definition_lines(
    number: int, definition: Definition, detail: bool, color: bool
) -> List[str]:
    lines = [
        f"{DEFINITION_INDENT}{paint(f'{number}.', 'light_green', enabled=color)} "
        f"{definition.definition}"
    ]
    if not detail:
        return lines
    if definition.example:
        lines.append(
            DETAIL_INDENT
            + _labelled("Example:", definition.example, "light_blue", enabled=color)
        )
    # Always printed, even for empty lists.
    lines.append(
        DETAIL_INDENT
        + _labelled("Synonyms:", ", ".join(definition.synonyms), "light_yellow", enabled=color)
    )
    lines.append(
        DETAIL_INDENT
        + _labelled("Antonyms:", ", ".join(definition.antonyms), "light_red", enabled=color)
    )
    return lines


def _meaning_lines(meaning: Meaning, detail: bool, color: bool) -> List[str]:
    lines = [
        _labelled(
            "Part of speech:",
            meaning.part_of_speech or "unknown",
            "light_magenta",
            "light_cyan",
            label_attrs=["bold"],
            enabled=color,
        )
    ]
    for number, definition in enumerate(meaning.definitions, 1):
        lines.extend(_definition_lines(number, definition, detail, color))
    if detail and meaning.synonyms:
        lines.append(
            DEFINITION_INDENT
            + _labelled("Synonyms:", ", ".join(meaning.synonyms), "light_yellow", enabled=color)
        )
    if detail and meaning.antonyms:
        lines.append(
            DEFINITION_INDENT
            + _labelled("Antonyms:", ", ".join(meaning.antonyms), "light_red", enabled=color)
        )
    lines.append("")
    return lines


def _footer_lines(entry: DictionaryEntry, color: bool) -> List[str]:
    lines = []
    if entry.source_urls:
        lines.append(
            _labelled(
                "Source:",
                entry.source_urls[0],
                "light_blue",
                "white",
                value_attrs=["underline"],
                enabled=color,
            )
        )
    if entry.license is not None:
        lines.append(
            _labelled(
                "License:",
                f"{entry.license.name} ({entry.license.url})",
                "light_blue",
                enabled=color,
            )
        )
    return lines


def format_entry(entry: DictionaryEntry, detail: bool = False, color: bool = True) -> str:
    """Render one entry as terminal text.

    Basic mode lists the numbered definitions under each part of speech.
    Detail mode adds examples, synonym and antonym lines and the entry's
    source and license.
    """
    lines = _header_lines(entry, color)
    for meaning in entry.meanings:
        lines.extend(_meaning_lines(meaning, detail, color))
    if detail:
        lines.extend(_footer_lines(entry, color))
    return "\n".join(lines)


def display_entry(
    entry: DictionaryEntry,
    detail: bool = False,
    color: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    print(format_entry(entry, detail=detail, color=color), file=stream or sys.stdout)


def format_lookup_banner(word: str, color: bool = True) -> str:
    return _labelled(
        "Looking up:", word, "light_green", "white", value_attrs=["bold"], enabled=color
    )


def format_error(message: str, color: bool = True) -> str:
    return _labelled(
        "Error:", message, "light_red", "light_red", label_attrs=["bold"], enabled=color
    )
