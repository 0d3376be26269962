"""Tests for grapheme classification."""

import pytest

from tts_chunker.services.tts.classifier import (
    EMPHASIS_BREAKS,
    HARD_BREAKS,
    SOFT_BREAKS,
    GraphemeClass,
    classify,
    contains_digit,
)


class TestClassify:
    @pytest.mark.parametrize("char", [".", "。", "…", "⋯", "～", "~", "「", "」", "\n", "\t", "\r"])
    def test_hard_breaks(self, char):
        assert classify(char) is GraphemeClass.HARD_BREAK

    @pytest.mark.parametrize("char", ["?", "？", "!", "！"])
    def test_emphasis_marks_are_hard(self, char):
        kind = classify(char)
        assert kind is GraphemeClass.EMPHASIS
        assert kind.is_hard
        assert kind.is_breakpoint

    @pytest.mark.parametrize("char", [",", "，", "、", "–", "—", ":", "：", ";", "；", "《", "》"])
    def test_soft_breaks(self, char):
        kind = classify(char)
        assert kind is GraphemeClass.SOFT_BREAK
        assert kind.is_breakpoint
        assert not kind.is_hard

    def test_digits(self):
        assert classify("7") is GraphemeClass.DIGIT
        assert not GraphemeClass.DIGIT.is_breakpoint

    @pytest.mark.parametrize("grapheme", ["a", " ", "中", "-", "'"])
    def test_content(self, grapheme):
        assert classify(grapheme) is GraphemeClass.CONTENT

    @pytest.mark.parametrize("grapheme", ["\r\n", "e\u0301", "👋🏽", "1️⃣"])
    def test_multi_codepoint_clusters_are_content(self, grapheme):
        assert classify(grapheme) is GraphemeClass.CONTENT

    def test_emphasis_is_subset_of_hard(self):
        assert EMPHASIS_BREAKS <= HARD_BREAKS
        assert not (HARD_BREAKS & SOFT_BREAKS)

    def test_sets_are_immutable(self):
        assert isinstance(HARD_BREAKS, frozenset)
        assert isinstance(SOFT_BREAKS, frozenset)


class TestContainsDigit:
    def test_single_digit(self):
        assert contains_digit("3")

    def test_cluster_with_digit(self):
        assert contains_digit("1️⃣")

    def test_non_digit(self):
        assert not contains_digit("a")

    def test_none(self):
        assert not contains_digit(None)

    def test_non_ascii_digit_ignored(self):
        assert not contains_digit("٣")
