"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest

from pagelens.config import DEFAULT_CONFIG, load_config


def test_defaults_when_file_missing(monkeypatch):
    monkeypatch.delenv("PAGELENS_MIN_RELEVANCE", raising=False)
    cfg = load_config("/nonexistent/config.yaml")
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_file_overrides_are_deep_merged(monkeypatch):
    monkeypatch.delenv("PAGELENS_MIN_RELEVANCE", raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "config.yaml"
        path.write_text("grouping:\n  content_threshold: 0.4\n")
        cfg = load_config(path)
        assert cfg["grouping"]["content_threshold"] == 0.4
        assert cfg["grouping"]["combined_threshold"] == 0.5
        assert DEFAULT_CONFIG["grouping"]["content_threshold"] == 0.6


def test_env_override(monkeypatch):
    monkeypatch.setenv("PAGELENS_MIN_RELEVANCE", "0.25")
    cfg = load_config("/nonexistent/config.yaml")
    assert cfg["recommendations"]["min_relevance"] == 0.25


def test_non_finite_threshold_rejected(monkeypatch):
    monkeypatch.delenv("PAGELENS_MIN_RELEVANCE", raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "config.yaml"
        path.write_text("recommendations:\n  min_relevance: .nan\n")
        with pytest.raises(ValueError):
            load_config(path)


def test_config_must_be_mapping():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_config(path)


def test_section_must_be_mapping(monkeypatch):
    monkeypatch.delenv("PAGELENS_MIN_RELEVANCE", raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "config.yaml"
        path.write_text("grouping: 5\n")
        with pytest.raises(ValueError, match="grouping"):
            load_config(path)


def test_negative_count_rejected(monkeypatch):
    monkeypatch.delenv("PAGELENS_MIN_RELEVANCE", raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "config.yaml"
        path.write_text("summary:\n  max_sentences: -1\n")
        with pytest.raises(ValueError, match="max_sentences"):
            load_config(path)


def test_zero_ngram_size_rejected(monkeypatch):
    monkeypatch.delenv("PAGELENS_MIN_RELEVANCE", raising=False)
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "config.yaml"
        path.write_text("similarity:\n  ngram_size: 0\n")
        with pytest.raises(ValueError):
            load_config(path)
