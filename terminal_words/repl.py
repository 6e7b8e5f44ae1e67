from __future__ import annotations

import sys
from typing import Callable, List, Optional, TextIO

from entries import DictionaryEntry, DictionaryError
from render import display_entry, format_error

EXIT_COMMANDS = {"exit", "quit"}
PROMPT = "> "

Lookup = Callable[[str], List[DictionaryEntry]]


def read_word(stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Prompt for one line. Returns None at end of input."""
    stdout.write(PROMPT)
    stdout.flush()
    line = stdin.readline()
    if not line:
        return None
    return line.strip()


def run_interactive(
    lookup: Lookup,
    detail: bool = False,
    color: bool = True,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print("Interactive mode. Type a word to look it up, 'exit' or 'quit' to leave.", file=stdout)

    while True:
        try:
            word = read_word(stdin, stdout)
        except KeyboardInterrupt:
            print(file=stdout)
            return 0
        if word is None:
            print(file=stdout)
            return 0
        if not word:
            continue
        if word.casefold() in EXIT_COMMANDS:
            return 0

        try:
            entries = lookup(word)
        except DictionaryError as exc:
            print(format_error(str(exc), color=color), file=stdout)
            continue
        for entry in entries:
            display_entry(entry, detail=detail, color=color, stream=stdout)
