"""Shared fixtures for spellchecker tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from spellcheck.dictionary import SpellChecker

WORDS = [
    # 1-letter
    "a", "i",
    # 2-letter
    "do",
    # 3-letter
    "bat", "cab", "can", "car", "cat", "cot", "dog", "dot", "hat",
    # 4-letter
    "held", "hell", "help",
    # 5-letter
    "hello",
]


@pytest.fixture
def words() -> list[str]:
    return list(WORDS)


@pytest.fixture
def small_dictionary() -> SpellChecker:
    """Hand-picked words inserted directly. No file I/O."""
    checker = SpellChecker()
    for w in WORDS:
        checker.insert(w)
    return checker


@pytest.fixture
def words_file(tmp_path: Path) -> Path:
    """The same word list written one word per line."""
    path = tmp_path / "words_alpha.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path
