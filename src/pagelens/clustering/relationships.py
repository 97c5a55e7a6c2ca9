"""Score pairwise relationships between documents as recommendations."""

import logging
from itertools import combinations
from typing import Sequence

from ..models import CrossRecommendation, Document
from ..similarity.metrics import combined_similarity, common_keywords, jaccard_similarity
from ..validation import require_finite

logger = logging.getLogger(__name__)


def _reason(shared: list[str], relevance: float) -> str:
    if shared:
        reason = f"Both pages discuss: {shared[0]}"
        if len(shared) > 1:
            reason += f" and {len(shared) - 1} more topics"
        return reason
    if relevance > 0.7:
        return "Highly similar content"
    return "Related content"


def generate_cross_recommendations(
    documents: Sequence[Document],
    min_relevance: float = 0.5,
) -> list[CrossRecommendation]:
    """Recommend document pairs whose text and keywords are related.

    Every pair is scored once, in batch order, as 0.6 x combined text
    similarity + 0.4 x keyword Jaccard. Pairs below min_relevance are
    skipped. Results are sorted by relevance, best first.
    """
    min_relevance = require_finite("min_relevance", min_relevance)
    recommendations = []

    for doc_a, doc_b in combinations(documents, 2):
        if doc_a.id == doc_b.id:
            continue
        text_sim = combined_similarity(doc_a.text, doc_b.text)
        keyword_sim = jaccard_similarity(doc_a.keywords, doc_b.keywords)
        relevance = 0.6 * text_sim + 0.4 * keyword_sim
        if relevance < min_relevance:
            continue

        shared = common_keywords(doc_a.keywords, doc_b.keywords)
        recommendations.append(CrossRecommendation(
            source_id=doc_a.id,
            target_id=doc_b.id,
            relevance_score=relevance,
            common_keywords=shared,
            reason=_reason(shared, relevance),
        ))

    # Sort by score descending
    recommendations.sort(key=lambda r: r.relevance_score, reverse=True)
    logger.debug("recommendations: %d pair(s) above %.2f", len(recommendations), min_relevance)
    return recommendations
