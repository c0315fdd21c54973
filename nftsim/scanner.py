"""Reading period-terminated sentences from a stream of words."""

from __future__ import annotations

from typing import Iterable


def read_sentence(tokens: Iterable[str]) -> str:
    """Join words from the input until one ends with '.', keeping that word whole.

    Each item may hold several whitespace-separated words, so lines of text
    can be passed as well as single words.
    """
    words: list[str] = []
    for chunk in tokens:
        for word in chunk.split():
            words.append(word)
            if word.endswith("."):
                return " ".join(words)
    raise EOFError("input ended before a word ending with '.'")