from __future__ import annotations

import argparse
import functools
import sys
from typing import List, Optional

from dictionary_api import DictionaryError, WordNotFoundError, lookup_word
from render import display_entry, format_error, format_lookup_banner
from repl import run_interactive
from settings import VERSION, Settings, load_settings

EXIT_OK = 0
EXIT_LOOKUP_FAILED = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terminal-words",
        description="A command-line dictionary tool.",
    )
    parser.add_argument(
        "word",
        nargs="?",
        help="Word to look up. Not needed with --interactive.",
    )
    parser.add_argument(
        "-d",
        "--detail",
        action="store_true",
        help="Show examples, synonyms and antonyms.",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Read words from standard input until 'exit', 'quit' or end of input.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {VERSION}",
    )
    return parser


def run_lookup(word: str, settings: Settings, detail: bool, color: bool) -> int:
    print(format_lookup_banner(word, color=color))
    try:
        entries = lookup_word(word, settings)
    except WordNotFoundError as exc:
        print(format_error(str(exc), color=color))
        return EXIT_OK
    except DictionaryError as exc:
        print(format_error(str(exc), color=color))
        return EXIT_LOOKUP_FAILED
    for entry in entries:
        display_entry(entry, detail=detail, color=color)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.interactive and (args.word is None or not args.word.strip()):
        parser.error("the word argument is required unless --interactive is given")

    try:
        settings = load_settings()
    except ValueError as exc:
        parser.error(f"invalid configuration: {exc}")
    color = settings.color and not args.no_color

    try:
        if args.interactive:
            return run_interactive(
                functools.partial(lookup_word, settings=settings),
                detail=args.detail,
                color=color,
            )
        return run_lookup(args.word.strip(), settings, args.detail, color)
    except KeyboardInterrupt:
        print()
        return EXIT_INTERRUPTED


def console_main() -> None:
    sys.exit(main())


if __name__ == "__main__":
    console_main()
