"""Pairwise similarity between texts, keyword sets and content summaries."""

import logging
import math
from typing import Sequence

import numpy as np

from ..models import ContentSummary, Document, RelevanceScore
from ..text.tokenizer import document_frequency, term_frequency, tokenize
from ..validation import require_finite

logger = logging.getLogger(__name__)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def _set_overlap(a: set, b: set) -> float:
    """Intersection over union; two empty sets count as identical."""
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def cosine_similarity(text_a: str, text_b: str) -> float:
    """Cosine of the angle between the term-frequency vectors of two texts.

    Returns 0.0 when either text has no tokens.
    """
    tf_a = term_frequency(tokenize(text_a))
    tf_b = term_frequency(tokenize(text_b))
    if not tf_a or not tf_b:
        return 0.0

    # Fixed term order keeps the result exactly symmetric.
    terms = sorted(tf_a.keys() | tf_b.keys())
    va = np.array([tf_a.get(t, 0.0) for t in terms])
    vb = np.array([tf_b.get(t, 0.0) for t in terms])

    mag_a = float(np.dot(va, va))
    mag_b = float(np.dot(vb, vb))
    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0

    return _clamp(float(np.dot(va, vb)) / math.sqrt(mag_a * mag_b))


def jaccard_similarity(keywords_a: Sequence[str], keywords_b: Sequence[str]) -> float:
    """Jaccard index of two keyword lists taken as sets, compared verbatim."""
    return _set_overlap(set(keywords_a or ()), set(keywords_b or ()))


def _ngrams(tokens: list[str], n: int) -> set[str]:
    if len(tokens) < n:
        return set(tokens)
    return {" ".join(tokens[i:i + n]) for i in range(len(tokens) - n + 1)}


def ngram_similarity(text_a: str, text_b: str, n: int = 2) -> float:
    """Jaccard overlap of the contiguous token n-grams of two texts."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError(f"n must be a positive integer, got {n!r}")
    return _set_overlap(_ngrams(tokenize(text_a), n), _ngrams(tokenize(text_b), n))


def combined_similarity(text_a: str, text_b: str) -> float:
    """Weighted blend of cosine, bigram and trigram similarity."""
    score = (
        0.5 * cosine_similarity(text_a, text_b)
        + 0.3 * ngram_similarity(text_a, text_b, 2)
        + 0.2 * ngram_similarity(text_a, text_b, 3)
    )
    return _clamp(score)


def summary_similarity(a: ContentSummary, b: ContentSummary) -> float:
    """Similarity of two content summaries.

    Text and key points carry most of the weight; matching content type,
    matching language and comparable reading time add small bonuses.
    """
    text_sim = cosine_similarity(a.summary_text, b.summary_text)
    points_sim = jaccard_similarity(a.key_points, b.key_points)

    type_bonus = 0.1 if a.content_type == b.content_type else 0.0
    lang_bonus = 0.05 if a.language == b.language else 0.0

    longest = max(a.reading_time_minutes, b.reading_time_minutes)
    ratio = min(a.reading_time_minutes, b.reading_time_minutes) / longest if longest > 0 else 1.0

    score = 0.55 * text_sim + 0.25 * points_sim + type_bonus + lang_bonus + 0.05 * ratio
    return _clamp(score)


def tf_idf(document: str, corpus: Sequence[str]) -> dict[str, float]:
    """TF-IDF weights of the terms in document against corpus.

    The document itself counts as part of the corpus, so every term has a
    document frequency of at least one.
    """
    tf = term_frequency(tokenize(document))
    corpus_size = len(corpus) + 1
    df = document_frequency(tokenize(doc) for doc in corpus)

    weights = {}
    for term, freq in tf.items():
        doc_count = 1 + df[term]
        weights[term] = freq * math.log(corpus_size / doc_count)
    return weights


def find_similar(query: str, corpus: Sequence[str], threshold: float = 0.5) -> list[tuple[int, float]]:
    """Rank corpus entries by cosine similarity to query.

    Returns (index, score) pairs with score >= threshold, best first.
    Entries with equal scores keep their corpus order.
    """
    threshold = require_finite("threshold", threshold)
    results = []
    for i, doc in enumerate(corpus):
        score = cosine_similarity(query, doc)
        if score >= threshold:
            results.append((i, score))

    results.sort(key=lambda r: r[1], reverse=True)
    logger.debug("find_similar: %d of %d documents above %.2f", len(results), len(corpus), threshold)
    return results


def common_keywords(keywords_a: Sequence[str], keywords_b: Sequence[str]) -> list[str]:
    """Every keyword of a that matches a keyword of b, once per matching pair."""
    return [kw_a for kw_a in keywords_a for kw_b in keywords_b if kw_a == kw_b]


def content_relevance(doc_a: Document, doc_b: Document) -> RelevanceScore:
    """Relevance of two documents from body text and keywords."""
    text_sim = cosine_similarity(doc_a.text, doc_b.text)
    keyword_sim = jaccard_similarity(doc_a.keywords, doc_b.keywords)
    return RelevanceScore(
        score=_clamp(0.7 * text_sim + 0.3 * keyword_sim),
        common_keywords=common_keywords(doc_a.keywords, doc_b.keywords),
    )
