"""Data models used throughout pagelens."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

DocumentId = Union[str, int]


class ContentType(Enum):
    """Page category supplied by the content-type classifier."""
    ARTICLE = "article"
    VIDEO = "video"
    DOCUMENTATION = "documentation"
    SOCIAL_MEDIA = "social_media"
    SHOPPING = "shopping"
    NEWS = "news"
    REFERENCE = "reference"
    OTHER = "other"


@dataclass(frozen=True)
class Document:
    """A harvested page, already reduced to plain text."""
    id: DocumentId
    text: str
    title: str = ""
    keywords: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)


@dataclass
class ContentSummary:
    """Summary of a single document."""
    summary_text: str
    key_points: list[str] = field(default_factory=list)
    content_type: ContentType = ContentType.ARTICLE
    language: str = "en"
    reading_time_minutes: int = 1
    confidence_score: float = 0.0


@dataclass
class GroupSuggestion:
    """A proposed set of related documents."""
    name: str
    description: str
    member_ids: list[DocumentId] = field(default_factory=list)
    similarity_score: float = 0.0
    quality_score: float = 0.0


@dataclass
class CrossRecommendation:
    """A scored recommendation edge between two documents."""
    source_id: DocumentId
    target_id: DocumentId
    relevance_score: float
    common_keywords: list[str] = field(default_factory=list)
    reason: str = ""


@dataclass
class RelevanceScore:
    """Relevance between a single pair of documents."""
    score: float
    common_keywords: list[str] = field(default_factory=list)
