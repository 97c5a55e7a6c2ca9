"""Content processor: the analysis operations with configured defaults."""

from typing import Any, Sequence

from .clustering import (
    detect_clusters,
    generate_cross_recommendations,
    suggest_by_content,
    suggest_by_domain,
    suggest_by_topic,
    suggest_groups_combined,
)
from .config import DEFAULT_CONFIG
from .models import ContentSummary, ContentType, CrossRecommendation, Document, GroupSuggestion
from .similarity import find_similar, ngram_similarity
from .summarize import extract_keywords, summarize_document


class ContentProcessor:
    """Runs analysis operations using thresholds from a config dict.

    Holds no state beyond the configuration, so one instance can serve
    any number of batches.
    """

    GROUPING_METHODS = ("content", "domain", "topic", "combined")

    def __init__(self, config: dict[str, Any] | None = None):
        config = config or DEFAULT_CONFIG
        self.similarity_cfg = config.get("similarity", DEFAULT_CONFIG["similarity"])
        self.grouping_cfg = config.get("grouping", DEFAULT_CONFIG["grouping"])
        self.summary_cfg = config.get("summary", DEFAULT_CONFIG["summary"])
        self.recommend_cfg = config.get("recommendations", DEFAULT_CONFIG["recommendations"])

    def summarize(
        self,
        document: Document,
        content_type: ContentType = ContentType.ARTICLE,
        language: str = "en",
    ) -> ContentSummary:
        return summarize_document(
            document,
            content_type=content_type,
            language=language,
            max_sentences=self.summary_cfg.get("max_sentences", 3),
            max_points=self.summary_cfg.get("max_points", 5),
        )

    def keywords(self, document: Document) -> list[str]:
        """Keywords supplied with the document, else ones extracted from its text."""
        if document.keywords:
            return list(document.keywords)
        return extract_keywords(document.text, self.summary_cfg.get("max_keywords", 10))

    def ngram_similarity(self, text_a: str, text_b: str) -> float:
        return ngram_similarity(text_a, text_b, self.similarity_cfg.get("ngram_size", 2))

    def find_similar(self, query: str, documents: Sequence[Document]) -> list[tuple[Document, float]]:
        """Documents most similar to query, best first."""
        matches = find_similar(
            query,
            [d.text for d in documents],
            self.similarity_cfg.get("find_threshold", 0.5),
        )
        return [(documents[i], score) for i, score in matches]

    def suggest_groups(self, documents: Sequence[Document], method: str = "combined") -> list[GroupSuggestion]:
        """Group suggestions using one of GROUPING_METHODS."""
        if method == "content":
            return suggest_by_content(documents, self.grouping_cfg.get("content_threshold", 0.6))
        if method == "domain":
            return suggest_by_domain(documents)
        if method == "topic":
            return suggest_by_topic(documents)
        if method == "combined":
            return suggest_groups_combined(documents, self.grouping_cfg.get("combined_threshold", 0.5))
        raise ValueError(f"Unknown grouping method: {method}")

    def clusters(self, documents: Sequence[Document], num_clusters: int | None = None) -> list[GroupSuggestion]:
        if num_clusters is None:
            num_clusters = self.grouping_cfg.get("num_clusters", 0)
        return detect_clusters(documents, num_clusters)

    def recommendations(self, documents: Sequence[Document]) -> list[CrossRecommendation]:
        return generate_cross_recommendations(documents, self.recommend_cfg.get("min_relevance", 0.5))
