"""Grouping, hierarchical clustering and cross-document recommendations."""

from .cluster import detect_clusters, similarity_matrix
from .groups import (
    generate_group_description,
    generate_group_name,
    merge_groups,
    rank_suggestions,
    suggest_by_content,
    suggest_by_domain,
    suggest_by_topic,
    suggest_groups_combined,
)
from .relationships import generate_cross_recommendations

__all__ = [
    "suggest_by_content",
    "suggest_by_domain",
    "suggest_by_topic",
    "merge_groups",
    "rank_suggestions",
    "suggest_groups_combined",
    "generate_group_name",
    "generate_group_description",
    "similarity_matrix",
    "detect_clusters",
    "generate_cross_recommendations",
]
