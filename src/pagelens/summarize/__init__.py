"""Extractive summarization and keyword extraction."""

from .summarizer import (
    estimate_reading_time,
    extract_key_points,
    extract_keywords,
    generate_summary,
    split_sentences,
    summarize_document,
)

__all__ = [
    "split_sentences",
    "generate_summary",
    "extract_keywords",
    "extract_key_points",
    "estimate_reading_time",
    "summarize_document",
]
