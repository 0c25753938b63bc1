"""Spellchecker web application — Flask JSON backend."""
from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root is on sys.path so `spellcheck.*` imports work
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from flask import Flask, jsonify, request

from spellcheck.dictionary import SpellChecker, load_default_dictionary

app = Flask(__name__)

# Loaded on first request, shared by every route afterwards
DICTIONARY: SpellChecker | None = None


def get_dictionary() -> SpellChecker:
    global DICTIONARY
    if DICTIONARY is None:
        DICTIONARY = load_default_dictionary()
    return DICTIONARY


def _param(name: str) -> str | None:
    value = request.args.get(name)
    if value is None:
        return None
    return value.strip()


@app.errorhandler(FileNotFoundError)
def dictionary_missing(e: FileNotFoundError):
    return jsonify({"error": f"Dictionary unavailable: {e}"}), 500


@app.route("/check")
def check():
    word = _param("word")
    if not word:
        return jsonify({"error": "Missing 'word' parameter"}), 400
    return jsonify({"word": word, "correct": get_dictionary().contains(word)})


@app.route("/complete")
def complete():
    # An empty prefix is valid: it asks for the single-letter words
    prefix = _param("prefix")
    if prefix is None:
        return jsonify({"error": "Missing 'prefix' parameter"}), 400
    completions = get_dictionary().completions(prefix)
    if completions is None:
        return jsonify({"error": f"Unknown prefix '{prefix}'"}), 404
    return jsonify({"prefix": prefix, "completions": completions})


@app.route("/correct")
def correct():
    word = _param("word")
    if not word:
        return jsonify({"error": "Missing 'word' parameter"}), 400
    corrections = get_dictionary().end_corrections(word)
    if corrections is None:
        return jsonify({"error": f"Unknown prefix '{word[:-1]}'"}), 404
    return jsonify({"word": word, "corrections": corrections})


@app.route("/suggest")
def suggest():
    word = _param("word")
    if not word:
        return jsonify({"error": "Missing 'word' parameter"}), 400
    return jsonify({"word": word, "suggestions": get_dictionary().corrections(word)})


if __name__ == "__main__":
    print(f"Dictionary loaded: {get_dictionary().word_count} words")
    app.run(debug=True, host="0.0.0.0", port=8080)
