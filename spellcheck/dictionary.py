"""Trie-based spellchecker: word lookup, one-letter completions and corrections."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from spellcheck.constants import ALPHABET, DICT_ENV_VAR, DICT_FILENAME, NUM_LETTERS

log = logging.getLogger("spellcheck")


def _index(ch: str) -> int | None:
    """Slot of a lowercase letter, or None for anything outside a-z."""
    if len(ch) == 1 and "a" <= ch <= "z":
        return ord(ch) - ord("a")
    return None


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: list[TrieNode | None] = [None] * NUM_LETTERS
        self.is_word: bool = False

    def child(self, ch: str) -> TrieNode | None:
        i = _index(ch)
        if i is None:
            return None
        return self.children[i]


class SpellChecker:
    """Prefix trie over a dictionary of lowercase words.

    Built once from a word list, then queried. Queries never raise: unknown
    words and characters outside a-z simply fail to match.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._word_count = 0
        for word in words:
            self.insert(word)

    @classmethod
    def from_file(cls, path: str | Path) -> SpellChecker:
        """Build a checker from a word list file (one word per line).

        Lines that are not plain lowercase words are skipped.
        """
        checker = cls()
        for word in read_words(path):
            if not is_valid_word(word):
                log.debug("Skipping %r: not a lowercase a-z word", word)
                continue
            checker.insert(word)
        return checker

    def insert(self, word: str) -> None:
        if not is_valid_word(word):
            raise ValueError(f"Cannot insert {word!r}: words must be non-empty and use only a-z")
        node = self.root
        for ch in word:
            i = ord(ch) - ord("a")
            if node.children[i] is None:
                node.children[i] = TrieNode()
            node = node.children[i]
        if not node.is_word:
            node.is_word = True
            self._word_count += 1

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def completions(self, prefix: str) -> list[str] | None:
        """One-letter extensions of ``prefix`` that are words, in a-z order.

        Returns None when ``prefix`` is not on any path in the trie, and an
        empty list when it is but no extension is a word.
        """
        node = self._walk(prefix)
        if node is None:
            return None
        return [
            prefix + ALPHABET[i]
            for i, child in enumerate(node.children)
            if child is not None and child.is_word
        ]

    def end_corrections(self, word: str) -> list[str] | None:
        """Words obtained by replacing the last letter of ``word``."""
        if not word:
            return None
        return self.completions(word[:-1])

    def corrections(self, word: str) -> list[str]:
        """Correct a single wrong letter in ``word``.

        Starts from the end corrections, then finds the first position where
        the trie path breaks and tries every letter there. Stops after that
        position; later positions are never considered.
        """
        found = self.end_corrections(word) or []
        node = self.root
        for i in range(len(word) - 1):
            nxt = node.child(word[i])
            if nxt is None or nxt.child(word[i + 1]) is None:
                for letter in ALPHABET:
                    candidate = word[:i] + letter + word[i + 1:]
                    if self.contains(candidate):
                        found.append(candidate)
                return found
            node = nxt
        return found

    @property
    def word_count(self) -> int:
        return self._word_count


def is_valid_word(word: str) -> bool:
    return bool(word) and all(_index(ch) is not None for ch in word)


def build(words: Iterable[str]) -> SpellChecker:
    """Build a checker by inserting ``words`` in order."""
    return SpellChecker(words)


def read_words(path: str | Path) -> list[str]:
    """Read a word list, one word per line, skipping blank lines."""
    with open(path, encoding="utf-8") as f:
        return [word for word in (line.strip() for line in f) if word]


def default_dictionary_path() -> Path:
    env_path = os.environ.get(DICT_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path(__file__).resolve().parent.parent / "data" / DICT_FILENAME


def load_default_dictionary(path: str | Path | None = None) -> SpellChecker:
    """Load the dictionary from ``path``, $SPELLCHECK_DICT, or data/words_alpha.txt."""
    path = Path(path) if path is not None else default_dictionary_path()
    if not path.exists():
        raise FileNotFoundError(
            f"Dictionary not found at {path}. "
            f"Place a word list (one lowercase word per line) at data/{DICT_FILENAME} "
            f"or point {DICT_ENV_VAR} at one."
        )
    checker = SpellChecker.from_file(path)
    log.info("Loaded %s words from %s", f"{checker.word_count:,}", path)
    return checker
