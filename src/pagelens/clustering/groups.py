"""Group suggestions by content, domain and topic, plus merging and ranking."""

import logging
import re
from collections import Counter
from dataclasses import replace
from typing import Sequence

from ..models import Document, GroupSuggestion
from ..similarity.metrics import cosine_similarity
from ..text.tokenizer import split_words
from ..validation import require_finite

logger = logging.getLogger(__name__)

URL_HOST_RE = re.compile(r"https?://([^/]+)")


def extract_domain(url: str) -> str:
    """Host part of the first http(s) URL in url, or "" if there is none."""
    match = URL_HOST_RE.search(url or "")
    return match.group(1) if match else ""


def find_common_words(texts: Sequence[str], max_words: int = 5) -> list[str]:
    """Words longer than three characters, ranked by how many texts use them."""
    counts: Counter = Counter()
    for text in texts:
        seen = set()
        for word in split_words(text):
            if len(word) > 3 and word not in seen:
                counts[word] += 1
                seen.add(word)
    return [word for word, _ in counts.most_common(max_words)]


def content_group_name(texts: Sequence[str], ordinal: int) -> str:
    """Up to three common words joined with " & ", else "Group <ordinal>"."""
    words = find_common_words(texts, 3)
    if not words:
        return f"Group {ordinal}"
    return " & ".join(words)


def generate_group_name(documents: Sequence[Document]) -> str:
    """Short title-cased name from the two most common words of a group."""
    if not documents:
        return "Empty Group"

    words = find_common_words([f"{d.title} {d.text}" for d in documents], 2)
    if not words:
        return "Unnamed Group"

    name = " ".join(words)
    return name[0].upper() + name[1:]


def generate_group_description(documents: Sequence[Document]) -> str:
    """One-line description of a group, mentioning its common keywords."""
    if not documents:
        return "No pages in this group"

    description = f"A collection of {len(documents)} related pages"
    keywords = [kw for d in documents for kw in d.keywords]
    if keywords:
        common = find_common_words(keywords, 3)
        if common:
            description += " about " + ", ".join(common)
    return description


def suggest_by_content(documents: Sequence[Document], similarity_threshold: float = 0.6) -> list[GroupSuggestion]:
    """Greedy grouping of documents whose text resembles an earlier seed.

    Each unassigned document, in batch order, seeds a group and claims
    every later unassigned document whose cosine similarity to the seed
    reaches the threshold. Groups of one are dropped.
    """
    similarity_threshold = require_finite("similarity_threshold", similarity_threshold)
    suggestions: list[GroupSuggestion] = []
    assigned = [False] * len(documents)

    for i, seed in enumerate(documents):
        if assigned[i]:
            continue
        assigned[i] = True
        members = [i]

        for j in range(i + 1, len(documents)):
            if assigned[j]:
                continue
            if cosine_similarity(seed.text, documents[j].text) >= similarity_threshold:
                members.append(j)
                assigned[j] = True

        member_ids = _unique_ids([documents[idx] for idx in members])
        if len(member_ids) < 2:
            continue

        texts = [documents[idx].text for idx in members]
        suggestions.append(GroupSuggestion(
            name=content_group_name(texts, len(suggestions) + 1),
            description="Pages with similar content",
            member_ids=member_ids,
            similarity_score=similarity_threshold,
        ))

    logger.debug("content grouping: %d group(s) from %d document(s)", len(suggestions), len(documents))
    return suggestions


def _partition(documents: Sequence[Document], key) -> dict[str, list[Document]]:
    buckets: dict[str, list[Document]] = {}
    for doc in documents:
        buckets.setdefault(key(doc), []).append(doc)
    return {k: v for k, v in buckets.items() if len(_unique_ids(v)) > 1}


def suggest_by_domain(documents: Sequence[Document]) -> list[GroupSuggestion]:
    """Group documents whose first link points at the same host."""
    def domain_of(doc: Document) -> str:
        domain = extract_domain(doc.links[0]) if doc.links else ""
        return domain or "unknown"

    return [
        GroupSuggestion(
            name=domain,
            description=f"Pages from {domain}",
            member_ids=_unique_ids(members),
            similarity_score=1.0,
        )
        for domain, members in _partition(documents, domain_of).items()
    ]


def suggest_by_topic(documents: Sequence[Document]) -> list[GroupSuggestion]:
    """Group documents sharing the same primary (first) keyword."""
    def topic_of(doc: Document) -> str:
        return doc.keywords[0] if doc.keywords else "general"

    return [
        GroupSuggestion(
            name=topic,
            description=f"Pages about {topic}",
            member_ids=_unique_ids(members),
            similarity_score=0.8,
        )
        for topic, members in _partition(documents, topic_of).items()
    ]


def _unique_ids(documents: Sequence[Document]) -> list:
    return list(dict.fromkeys(d.id for d in documents))


def merge_groups(groups: Sequence[GroupSuggestion], merge_threshold: float = 0.8) -> list[GroupSuggestion]:
    """Fold together groups whose member sets overlap enough.

    Groups are scanned in order; each later group whose Jaccard overlap
    with the accumulated group reaches the threshold is absorbed into it
    and never considered again. A merged group keeps the lower score.
    """
    merge_threshold = require_finite("merge_threshold", merge_threshold)
    if len(groups) <= 1:
        return [replace(g, member_ids=list(g.member_ids)) for g in groups]

    merged: list[GroupSuggestion] = []
    processed = [False] * len(groups)

    for i, group in enumerate(groups):
        if processed[i]:
            continue
        processed[i] = True
        current = replace(group, member_ids=list(dict.fromkeys(group.member_ids)))

        for j in range(i + 1, len(groups)):
            if processed[j]:
                continue
            ids_a = set(current.member_ids)
            ids_b = set(groups[j].member_ids)
            union = ids_a | ids_b
            overlap = len(ids_a & ids_b) / len(union) if union else 0.0

            if overlap >= merge_threshold:
                current.member_ids.extend(m for m in dict.fromkeys(groups[j].member_ids) if m not in ids_a)
                current.similarity_score = min(current.similarity_score, groups[j].similarity_score)
                processed[j] = True

        merged.append(current)

    logger.debug("merge: %d group(s) -> %d", len(groups), len(merged))
    return merged


def quality_score(group: GroupSuggestion) -> float:
    """Composite quality of a suggestion from size, score and naming."""
    size = len(group.member_ids)
    if 2 <= size <= 5:
        quality = 0.3
    elif 6 <= size <= 10:
        quality = 0.2
    elif size > 10:
        quality = 0.1
    else:
        quality = 0.0

    quality += 0.4 * group.similarity_score
    if len(group.name) > 5:
        quality += 0.15
    if " " in group.name:
        quality += 0.1
    if group.description:
        quality += 0.05
    return quality


def rank_suggestions(suggestions: Sequence[GroupSuggestion]) -> list[GroupSuggestion]:
    """Order suggestions by quality, best first; ties keep input order."""
    ranked = [replace(s, member_ids=list(s.member_ids)) for s in suggestions]
    for s in ranked:
        s.quality_score = quality_score(s)
    ranked.sort(key=lambda s: s.quality_score, reverse=True)
    return ranked


def suggest_groups_combined(documents: Sequence[Document], similarity_threshold: float = 0.5) -> list[GroupSuggestion]:
    """Content, domain and topic suggestions merged and ranked together."""
    if not documents:
        return []

    candidates = (
        suggest_by_content(documents, similarity_threshold)
        + suggest_by_domain(documents)
        + suggest_by_topic(documents)
    )
    return rank_suggestions(merge_groups(candidates, 0.5))
