"""CLI entry point for the trie spellchecker."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable

from spellcheck.dictionary import SpellChecker, load_default_dictionary
from spellcheck.display import print_check, print_words

log = logging.getLogger("spellcheck")


class _ArgumentParser(argparse.ArgumentParser):
    """Exits with status 1 on usage errors instead of argparse's 2."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = _ArgumentParser(
        prog="spellcheck",
        description="Check, complete and correct words against a dictionary",
    )
    parser.add_argument(
        "command",
        help="One of: check, complete, correct, suggest",
    )
    parser.add_argument("word", help="Word or prefix to look up")
    parser.add_argument(
        "--dict", "-d",
        dest="dict_path",
        type=str,
        default=None,
        help="Word list to load (default: $SPELLCHECK_DICT or data/words_alpha.txt)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug-level logging",
    )
    return parser.parse_args(argv)


def _check(checker: SpellChecker, word: str) -> None:
    print_check(checker.contains(word))


def _complete(checker: SpellChecker, word: str) -> None:
    print_words(checker.completions(word), word)


def _correct(checker: SpellChecker, word: str) -> None:
    print_words(checker.end_corrections(word), word)


def _suggest(checker: SpellChecker, word: str) -> None:
    print_words(checker.corrections(word), word)


COMMANDS: dict[str, Callable[[SpellChecker, str], None]] = {
    "check": _check,
    "complete": _complete,
    "correct": _correct,
    "suggest": _suggest,
}


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    handler = COMMANDS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 1

    try:
        checker = load_default_dictionary(args.dict_path)
    except OSError as e:
        print(f"Could not load dictionary: {e}", file=sys.stderr)
        return 1
    log.debug("Running %s on %r", args.command, args.word)

    handler(checker, args.word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
