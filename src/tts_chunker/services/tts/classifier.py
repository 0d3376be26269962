"""Grapheme classification for chunk boundary detection."""

from __future__ import annotations

from enum import Enum

import regex

# Sentence terminators and line separators
HARD_BREAKS = frozenset(".。?？!！…⋯～~「」\n\t\r")
# Clause separators
SOFT_BREAKS = frozenset(",，、–—:：;；《》")
# Hard breaks that stay attached to a chunk flushed by the word limit
EMPHASIS_BREAKS = frozenset("?？!！")
# Separators that are transparent between two digits (3.14, 1,000)
DECIMAL_SEPARATORS = frozenset(".,")

_DIGIT_RE = regex.compile(r"[0-9]")


class GraphemeClass(str, Enum):
    """Category of a single grapheme cluster."""

    HARD_BREAK = "hard"
    SOFT_BREAK = "soft"
    EMPHASIS = "emphasis"
    DIGIT = "digit"
    CONTENT = "content"

    @property
    def is_breakpoint(self) -> bool:
        return self in (
            GraphemeClass.HARD_BREAK,
            GraphemeClass.SOFT_BREAK,
            GraphemeClass.EMPHASIS,
        )

    @property
    def is_hard(self) -> bool:
        return self in (GraphemeClass.HARD_BREAK, GraphemeClass.EMPHASIS)


def classify(grapheme: str) -> GraphemeClass:
    """
    Classify one grapheme cluster.

    Every breakpoint set holds single code points only, so a cluster made of
    several code points (emoji sequences, base letter plus combining marks,
    CRLF) is always content.
    """
    if len(grapheme) != 1:
        return GraphemeClass.CONTENT
    if grapheme in EMPHASIS_BREAKS:
        return GraphemeClass.EMPHASIS
    if grapheme in HARD_BREAKS:
        return GraphemeClass.HARD_BREAK
    if grapheme in SOFT_BREAKS:
        return GraphemeClass.SOFT_BREAK
    if _DIGIT_RE.match(grapheme):
        return GraphemeClass.DIGIT
    return GraphemeClass.CONTENT


def contains_digit(grapheme: str | None) -> bool:
    """Return True when the cluster holds an ASCII digit anywhere."""
    if not grapheme:
        return False
    return _DIGIT_RE.search(grapheme) is not None


def is_multi_codepoint(grapheme: str) -> bool:
    return len(grapheme) > 1


__all__ = [
    "DECIMAL_SEPARATORS",
    "EMPHASIS_BREAKS",
    "GraphemeClass",
    "HARD_BREAKS",
    "SOFT_BREAKS",
    "classify",
    "contains_digit",
    "is_multi_codepoint",
]
