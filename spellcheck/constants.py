"""Spellchecker constants: alphabet and dictionary location."""

import string

# Lowercase Latin alphabet, one trie slot per letter
ALPHABET: str = string.ascii_lowercase
NUM_LETTERS: int = len(ALPHABET)

# Default word list, looked up under data/ at the project root
DICT_FILENAME: str = "words_alpha.txt"

# Overrides the default dictionary path when set
DICT_ENV_VAR: str = "SPELLCHECK_DICT"
