"""Locale-neutral word counting used for chunk size thresholds."""

from __future__ import annotations

import regex

# Han, Hiragana and Katakana have no spaces between words; without a
# dictionary each character counts as one word.
_IDEOGRAPHIC = r"[\p{Han}\p{Hiragana}\p{Katakana}]"
_WORD_CHARS = r"[[\p{L}\p{M}\p{N}_]--[\p{Han}\p{Hiragana}\p{Katakana}]]"

WORD_PATTERN = regex.compile(
    rf"{_IDEOGRAPHIC}|{_WORD_CHARS}+(?:['’]{_WORD_CHARS}+)*",
    flags=regex.V1,
)


class WordCounter:
    """Count word-like tokens in a text span."""

    def __init__(self, pattern: regex.Pattern | None = None) -> None:
        self._pattern = pattern or WORD_PATTERN

    def count(self, span: str) -> int:
        if not span:
            return 0
        return sum(1 for _ in self._pattern.finditer(span))

    def tokens(self, span: str) -> list[str]:
        """Return the word-like tokens of ``span`` in order."""
        return self._pattern.findall(span)


_default_counter = WordCounter()


def count_words(span: str) -> int:
    """Count word-like tokens using the default locale-neutral rules."""
    return _default_counter.count(span)


__all__ = ["WORD_PATTERN", "WordCounter", "count_words"]
