"""Tests for word counting."""

from tts_chunker.services.tts.word_counter import WordCounter, count_words


def test_counts_simple_words():
    assert count_words("hello big world") == 3


def test_ignores_punctuation_and_whitespace():
    assert count_words("  Hello,  world!  ") == 2
    assert count_words(" -- ... ") == 0


def test_empty_span():
    assert count_words("") == 0


def test_apostrophes_join_words():
    assert count_words("it's fine, isn’t it") == 4


def test_numbers_are_words():
    assert count_words("314 is pi") == 3


def test_ideographs_count_individually():
    assert count_words("今天好") == 3
    assert count_words("hello世界") == 3


def test_emoji_are_not_words():
    assert count_words("hi 👋🏽 there") == 2


def test_combining_marks_stay_in_word():
    assert count_words("cafe\u0301 ouvert") == 2


def test_tokens():
    counter = WordCounter()
    assert counter.tokens("Don't stop, me now") == ["Don't", "stop", "me", "now"]
