"""Tests for the tokenizer and frequency model."""

import pytest

from pagelens.text import document_frequency, split_words, term_frequency, tokenize, word_frequency


def test_tokenize_basic():
    assert tokenize("Hello world, this is a test.") == ["hello", "world", "test"]


def test_tokenize_filters_short_words_and_stop_words():
    tokens = tokenize("I am a big cat")
    assert tokens == ["big", "cat"]


def test_tokenize_flushes_trailing_word():
    assert tokenize("alpha beta") == ["alpha", "beta"]


def test_tokenize_keeps_digits():
    assert tokenize("Python3 rocks!") == ["python3", "rocks"]


def test_tokenize_empty_and_non_text():
    assert tokenize("") == []
    assert tokenize(None) == []
    assert tokenize(42) == []


def test_split_words_unfiltered():
    assert list(split_words("Don't stop")) == ["don", "t", "stop"]


def test_term_frequency_normalized():
    tf = term_frequency(["cat", "dog", "cat"])
    assert tf["cat"] == pytest.approx(2 / 3)
    assert tf["dog"] == pytest.approx(1 / 3)
    assert sum(tf.values()) == pytest.approx(1.0)


def test_term_frequency_empty():
    assert term_frequency([]) == {}


def test_word_frequency_counts_in_first_seen_order():
    freq = word_frequency(["hello", "world", "hello"])
    assert freq["hello"] == 2
    assert freq["world"] == 1
    assert list(freq) == ["hello", "world"]


def test_document_frequency():
    df = document_frequency([["cat", "dog"], ["cat", "cat"]])
    assert df["cat"] == 2
    assert df["dog"] == 1
