"""Terminal rendering of spellchecker results."""

from __future__ import annotations

import sys


def render_check(is_word: bool) -> str:
    return "correct" if is_word else "incorrect"


def print_check(is_word: bool) -> None:
    print(render_check(is_word))


def print_words(words: list[str] | None, query: str) -> None:
    """Print one word per line.

    ``None`` means the prefix of ``query`` is unknown; that is reported on
    stderr so stdout stays a clean word list.
    """
    if words is None:
        print(f"No words start with the prefix of '{query}'.", file=sys.stderr)
        return
    for word in words:
        print(word)
