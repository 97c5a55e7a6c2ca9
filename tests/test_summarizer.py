"""Tests for extractive summarization and keyword extraction."""

import pytest

from pagelens.models import ContentType, Document
from pagelens.summarize import (
    estimate_reading_time,
    extract_key_points,
    extract_keywords,
    generate_summary,
    split_sentences,
    summarize_document,
)

SENTENCES = [
    "Solar panels convert sunlight into electricity.",
    "Solar energy adoption keeps growing worldwide.",
    "My neighbor bought a bright yellow bicycle.",
    "Solar panels require regular cleaning and maintenance.",
    "Breakfast today included pancakes and coffee.",
]
TEXT = " ".join(SENTENCES)


def test_split_sentences():
    sentences = split_sentences("This is the first sentence. This is the second one! And a third?")
    assert len(sentences) == 3
    assert "first" in sentences[0]
    assert "second" in sentences[1]
    assert "third" in sentences[2]


def test_split_sentences_abbreviation_guard():
    sentences = split_sentences("Dr. Smith visited the clinic today. It went well enough.")
    assert sentences == ["Dr. Smith visited the clinic today.", "It went well enough."]


def test_split_sentences_decimal_numbers():
    sentences = split_sentences("Version 3.5 shipped last week. Upgrade soon please.")
    assert sentences[0] == "Version 3.5 shipped last week."


def test_split_sentences_drops_short_fragments():
    assert split_sentences("Hi there! Okay. This sentence is long enough.") == [
        "This sentence is long enough."
    ]


def test_summary_short_text():
    assert generate_summary("Short text.", 3) == "Short text."


def test_summary_returns_all_when_few_sentences():
    text = "First sentence is here. Second sentence follows now."
    assert generate_summary(text, 3) == text


def test_summary_selects_top_sentences_in_source_order():
    assert generate_summary(TEXT, 2) == f"{SENTENCES[0]} {SENTENCES[1]}"
    assert generate_summary(TEXT, 3) == " ".join([SENTENCES[0], SENTENCES[1], SENTENCES[3]])


def test_summary_order_matches_source():
    summary = split_sentences(generate_summary(TEXT, 2))
    positions = [SENTENCES.index(s) for s in summary]
    assert positions == sorted(positions)


def test_summary_empty_and_fallback():
    assert generate_summary("", 3) == ""
    assert generate_summary("hi", 3) == "hi"
    text = "Stop! " * 60
    assert generate_summary(text, 3) == text[:200] + "..."


def test_summary_rejects_negative_count():
    with pytest.raises(ValueError):
        generate_summary(TEXT, -1)


def test_key_points_in_score_order():
    assert extract_key_points(TEXT, 3) == [SENTENCES[0], SENTENCES[3], SENTENCES[1]]


def test_key_points_truncated():
    long_sentence = "Word " * 40 + "ending here."
    points = extract_key_points(long_sentence, 1)
    assert len(points) == 1
    assert len(points[0]) == 150
    assert points[0].endswith("...")


def test_key_points_empty():
    assert extract_key_points("", 5) == []


def test_extract_keywords_drops_singletons():
    text = (
        "Rust programming language is fast and safe. "
        "Rust provides memory safety without garbage collection. "
        "Programming in Rust is enjoyable."
    )
    assert extract_keywords(text, 5) == ["rust", "programming"]


def test_extract_keywords_keeps_singletons_for_small_vocabulary():
    keywords = extract_keywords("Rust rust compilers borrow checker", 10)
    assert keywords == ["rust", "compilers", "borrow", "checker"]


def test_reading_time():
    assert estimate_reading_time("Short text.") == 1
    assert estimate_reading_time(" ".join(["word"] * 400)) == 2


def test_summarize_document():
    doc = Document(id="solar", text=TEXT, title="Solar power")
    summary = summarize_document(doc, content_type=ContentType.NEWS, language="en")
    assert summary.summary_text == generate_summary(TEXT, 3)
    assert summary.key_points == extract_key_points(TEXT, 5)
    assert summary.content_type is ContentType.NEWS
    assert summary.reading_time_minutes == 1
    assert summary.confidence_score == pytest.approx(0.85)
