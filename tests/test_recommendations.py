"""Tests for cross-document recommendations."""

import pytest

from pagelens.clustering import generate_cross_recommendations
from pagelens.models import Document

FLASK = Document(id=0, text="python web development with flask framework", keywords=["python", "web", "flask"])
DJANGO = Document(id=1, text="python web development with django framework", keywords=["python", "web", "django"])
COOKING = Document(id=2, text="italian cooking recipes pasta", keywords=["cooking"])


def test_shared_keywords_rank_first():
    recs = generate_cross_recommendations([FLASK, DJANGO, COOKING], 0.0)
    assert len(recs) == 3
    assert (recs[0].source_id, recs[0].target_id) == (0, 1)
    assert recs[0].common_keywords == ["python", "web"]
    assert recs[0].reason == "Both pages discuss: python and 1 more topics"


def test_min_relevance_filters_pairs():
    recs = generate_cross_recommendations([FLASK, DJANGO, COOKING])
    assert len(recs) == 1
    assert recs[0].relevance_score == pytest.approx(0.6 * 0.54 + 0.4 * 0.5)


def test_source_precedes_target():
    recs = generate_cross_recommendations([FLASK, DJANGO, COOKING], 0.0)
    order = {0: 0, 1: 1, 2: 2}
    for r in recs:
        assert order[r.source_id] < order[r.target_id]
    assert len({(r.source_id, r.target_id) for r in recs}) == len(recs)


def test_single_shared_keyword_reason():
    a = Document(id="a", text="rust ownership rules", keywords=["rust"])
    b = Document(id="b", text="rust ownership rules", keywords=["rust", "borrowing"])
    recs = generate_cross_recommendations([a, b])
    assert recs[0].reason == "Both pages discuss: rust"


def test_highly_similar_reason():
    a = Document(id=0, text="rust ownership and borrowing rules")
    b = Document(id=1, text="rust ownership and borrowing rules")
    recs = generate_cross_recommendations([a, b])
    assert recs[0].relevance_score == pytest.approx(1.0)
    assert recs[0].reason == "Highly similar content"


def test_related_content_reason():
    a = Document(id=0, text="rust ownership and borrowing rules", keywords=["rust"])
    b = Document(id=1, text="rust ownership and borrowing rules", keywords=["systems"])
    recs = generate_cross_recommendations([a, b])
    assert recs[0].relevance_score == pytest.approx(0.6)
    assert recs[0].reason == "Related content"
    assert recs[0].common_keywords == []


def test_duplicate_keywords_not_deduplicated():
    a = Document(id=0, text="same text here", keywords=["ai", "ai"])
    b = Document(id=1, text="same text here", keywords=["ai"])
    recs = generate_cross_recommendations([a, b])
    assert recs[0].common_keywords == ["ai", "ai"]
    assert recs[0].reason == "Both pages discuss: ai and 1 more topics"


def test_small_batches():
    assert generate_cross_recommendations([]) == []
    assert generate_cross_recommendations([FLASK]) == []


def test_rejects_infinite_threshold():
    with pytest.raises(ValueError):
        generate_cross_recommendations([FLASK, DJANGO], float("inf"))


def test_no_recommendation_from_a_document_to_itself():
    twin = Document(id=0, text=FLASK.text, keywords=FLASK.keywords)
    assert generate_cross_recommendations([FLASK, twin], 0.0) == []
