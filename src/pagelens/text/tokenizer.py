"""Word tokenizer and frequency statistics shared by every analysis step."""

from collections import Counter
from typing import Iterable, Iterator

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
    "be", "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "shall", "can", "need", "dare", "ought",
    "used", "this", "that", "these", "those", "i", "you", "he", "she", "it",
    "we", "they", "what", "which", "who", "whom", "whose", "where", "when",
    "why", "how", "all", "each", "every", "both", "few", "more", "most",
    "other", "some", "such", "no", "nor", "not", "only", "own", "same",
    "so", "than", "too", "very", "just", "also", "now", "here", "there",
})

MIN_TOKEN_LENGTH = 3


def split_words(text: str) -> Iterator[str]:
    """Yield lower-cased runs of alphanumeric characters."""
    if not isinstance(text, str):
        return

    word: list[str] = []
    for ch in text:
        if ch.isalnum():
            word.append(ch.lower())
        elif word:
            yield "".join(word)
            word.clear()

    if word:
        yield "".join(word)


def tokenize(text: str) -> list[str]:
    """Split text into lower-cased alphanumeric tokens.

    Any non-alphanumeric character ends the current word. Words shorter
    than three characters and stop words are dropped. Non-string input
    yields an empty list.
    """
    return [w for w in split_words(text) if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS]


def word_frequency(tokens: Iterable[str]) -> Counter:
    """Raw occurrence counts, ordered by first occurrence."""
    return Counter(tokens)


def term_frequency(tokens: list[str]) -> dict[str, float]:
    """Occurrence counts normalized by the number of tokens."""
    if not tokens:
        return {}
    total = float(len(tokens))
    return {term: count / total for term, count in word_frequency(tokens).items()}


def document_frequency(token_lists: Iterable[list[str]]) -> Counter:
    """Number of token lists each token appears in at least once."""
    df: Counter = Counter()
    for tokens in token_lists:
        df.update(set(tokens))
    return df
