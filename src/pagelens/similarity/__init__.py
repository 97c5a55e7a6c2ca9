"""Similarity metrics between texts, keyword sets and summaries."""

from .metrics import (
    combined_similarity,
    content_relevance,
    cosine_similarity,
    find_similar,
    jaccard_similarity,
    ngram_similarity,
    summary_similarity,
    tf_idf,
)

__all__ = [
    "cosine_similarity",
    "jaccard_similarity",
    "ngram_similarity",
    "combined_similarity",
    "summary_similarity",
    "tf_idf",
    "find_similar",
    "content_relevance",
]
