"""Agglomerative clustering of documents over combined text similarity."""

import logging
from typing import Sequence

import numpy as np

from ..models import Document, GroupSuggestion
from ..similarity.metrics import combined_similarity
from ..validation import require_count
from .groups import content_group_name, generate_group_description, rank_suggestions

logger = logging.getLogger(__name__)


def similarity_matrix(documents: Sequence[Document]) -> np.ndarray:
    """Symmetric matrix of pairwise combined similarity with a unit diagonal."""
    n = len(documents)
    matrix = np.eye(n)
    for i in range(n):
        for j in range(i + 1, n):
            sim = combined_similarity(documents[i].text, documents[j].text)
            matrix[i, j] = sim
            matrix[j, i] = sim
    return matrix


def auto_cluster_count(n_documents: int) -> int:
    """Default target cluster count for a batch of n documents."""
    return max(2, min(10, n_documents // 3))


def _average_linkage(matrix: np.ndarray, a: list[int], b: list[int]) -> float:
    return float(matrix[np.ix_(a, b)].mean())


def detect_clusters(documents: Sequence[Document], num_clusters: int = 0) -> list[GroupSuggestion]:
    """Run average-linkage agglomerative clustering down to num_clusters.

    Args:
        documents: The batch to cluster.
        num_clusters: Target cluster count; 0 picks one from the batch size.
            Negative or non-integer targets raise ValueError.

    Returns:
        Ranked GroupSuggestion per cluster with at least two members.
    """
    num_clusters = require_count("num_clusters", num_clusters)
    if not documents:
        return []

    target = num_clusters if num_clusters > 0 else auto_cluster_count(len(documents))

    matrix = similarity_matrix(documents)
    clusters: list[list[int]] = [[i] for i in range(len(documents))]

    while len(clusters) > target and len(clusters) > 1:
        best = -1.0
        merge_i, merge_j = 0, 1
        for i in range(len(clusters)):
            for j in range(i + 1, len(clusters)):
                sim = _average_linkage(matrix, clusters[i], clusters[j])
                if sim > best:
                    best = sim
                    merge_i, merge_j = i, j

        clusters[merge_i].extend(clusters[merge_j])
        del clusters[merge_j]

    results = []
    for members in clusters:
        cluster_docs = [documents[i] for i in members]
        member_ids = list(dict.fromkeys(d.id for d in cluster_docs))
        if len(member_ids) < 2:
            continue

        pairs = [(a, b) for a in members for b in members if a < b]
        score = float(np.mean([matrix[a, b] for a, b in pairs])) if pairs else 0.5

        results.append(GroupSuggestion(
            name=content_group_name([d.text for d in cluster_docs], len(results) + 1),
            description=generate_group_description(cluster_docs),
            member_ids=member_ids,
            similarity_score=score,
        ))

    logger.debug("clustering: %d document(s) -> %d cluster(s), target %d",
                 len(documents), len(results), target)
    return rank_suggestions(results)
