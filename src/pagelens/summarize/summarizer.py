"""Frequency-based extractive summarization."""

import logging

from ..models import ContentSummary, ContentType, Document
from ..text.tokenizer import tokenize, word_frequency
from ..validation import require_count

logger = logging.getLogger(__name__)

SENTENCE_ENDINGS = ".!?"
MIN_SENTENCE_LENGTH = 10
MAX_ABBREVIATION_LENGTH = 3
MAX_KEY_POINT_LENGTH = 150
FALLBACK_SUMMARY_LENGTH = 200
WORDS_PER_MINUTE = 200


def split_sentences(text: str) -> list[str]:
    """Split text on sentence punctuation.

    A period right after a short word (three characters or fewer, e.g.
    "Dr." or "3.5") is treated as part of the sentence. Sentences shorter
    than ten characters are dropped.
    """
    sentences: list[str] = []
    current: list[str] = []
    word_length = 0

    def flush():
        sentence = "".join(current).strip()
        if len(sentence) >= MIN_SENTENCE_LENGTH:
            sentences.append(sentence)
        current.clear()

    for ch in text or "":
        current.append(ch)
        if ch in SENTENCE_ENDINGS:
            if ch == "." and 0 < word_length <= MAX_ABBREVIATION_LENGTH:
                word_length = 0
                continue
            flush()
        word_length = word_length + 1 if ch.isalnum() else 0

    if current:
        flush()
    return sentences


def _score_sentence(sentence: str, freq: dict[str, int], max_freq: int) -> float:
    """Mean relative frequency of a sentence's tokens, weighted by length."""
    tokens = tokenize(sentence)
    if not tokens:
        return 0.0

    score = sum(freq.get(t, 0) / max_freq for t in tokens)

    if len(tokens) < 5:
        length_factor = 0.5
    elif len(tokens) > 30:
        length_factor = 0.7
    else:
        length_factor = 1.0

    return score / len(tokens) * length_factor


def _scored_sentences(text: str, sentences: list[str], positional_boost: bool) -> list[tuple[float, int]]:
    freq = word_frequency(tokenize(text))
    max_freq = max(freq.values(), default=1)

    scored = []
    for i, sentence in enumerate(sentences):
        score = _score_sentence(sentence, freq, max_freq)
        if positional_boost and i < 3:
            score *= 1.2
        scored.append((score, i))

    scored.sort(key=lambda s: s[0], reverse=True)
    return scored


def generate_summary(text: str, max_sentences: int = 3) -> str:
    """Pick the highest-scoring sentences of text, kept in source order.

    Args:
        text: The text to summarize.
        max_sentences: Maximum number of sentences in the summary.

    Returns:
        The selected sentences joined by single spaces. Text without any
        usable sentence is returned as-is, cut to 200 characters.
    """
    require_count("max_sentences", max_sentences)
    if not text:
        return ""

    sentences = split_sentences(text)
    if not sentences:
        if len(text) <= FALLBACK_SUMMARY_LENGTH:
            return text
        return text[:FALLBACK_SUMMARY_LENGTH] + "..."

    if len(sentences) <= max_sentences:
        return " ".join(sentences)

    scored = _scored_sentences(text, sentences, positional_boost=True)
    selected = sorted(i for _, i in scored[:max_sentences])
    logger.debug("summary: kept %d of %d sentences", len(selected), len(sentences))
    return " ".join(sentences[i] for i in selected)


def extract_keywords(text: str, max_keywords: int = 10) -> list[str]:
    """Most frequent tokens of text.

    Tokens seen only once are included only when the text has fewer
    distinct tokens than max_keywords.
    """
    require_count("max_keywords", max_keywords)
    counts = word_frequency(tokenize(text))
    keep_singletons = len(counts) < max_keywords

    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [
        word for word, count in ranked[:max_keywords]
        if count > 1 or keep_singletons
    ]


def extract_key_points(text: str, max_points: int = 5) -> list[str]:
    """Best-scoring sentences of text, best first, long ones shortened."""
    require_count("max_points", max_points)
    if not text:
        return []

    sentences = split_sentences(text)
    if not sentences:
        return []

    points = []
    for _, i in _scored_sentences(text, sentences, positional_boost=False)[:max_points]:
        sentence = sentences[i]
        if len(sentence) > MAX_KEY_POINT_LENGTH:
            sentence = sentence[:MAX_KEY_POINT_LENGTH - 3] + "..."
        points.append(sentence)
    return points


def estimate_reading_time(text: str) -> int:
    """Reading time in whole minutes at 200 words per minute, at least 1."""
    return max(1, len((text or "").split()) // WORDS_PER_MINUTE)


def summarize_document(
    document: Document,
    content_type: ContentType = ContentType.ARTICLE,
    language: str = "en",
    max_sentences: int = 3,
    max_points: int = 5,
) -> ContentSummary:
    """Build a ContentSummary for a document.

    content_type and language come from the caller's classifiers and are
    stored unchanged.
    """
    summary_text = generate_summary(document.text, max_sentences)
    key_points = extract_key_points(document.text, max_points)

    confidence = 0.5
    if summary_text:
        confidence += 0.15
    if key_points:
        confidence += 0.1
    if document.title:
        confidence += 0.1
    if len(document.text) > 500:
        confidence += 0.05

    return ContentSummary(
        summary_text=summary_text,
        key_points=key_points,
        content_type=content_type,
        language=language,
        reading_time_minutes=estimate_reading_time(document.text),
        confidence_score=min(confidence, 0.95),
    )
