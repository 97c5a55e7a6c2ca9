"""Tokenization and frequency statistics."""

from .tokenizer import STOP_WORDS, document_frequency, split_words, term_frequency, tokenize, word_frequency

__all__ = ["STOP_WORDS", "split_words", "tokenize", "term_frequency", "word_frequency", "document_frequency"]
