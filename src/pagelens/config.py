"""Configuration management for pagelens."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from .validation import require_count, require_finite


DEFAULT_CONFIG = {
    "similarity": {"ngram_size": 2, "find_threshold": 0.5},
    "grouping": {
        "content_threshold": 0.6,
        "combined_threshold": 0.5,
        "num_clusters": 0,
    },
    "summary": {"max_sentences": 3, "max_keywords": 10, "max_points": 5},
    "recommendations": {"min_relevance": 0.5},
}


def _find_config_file() -> Path | None:
    """Look for config.yaml in standard locations."""
    if env_path := os.environ.get("PAGELENS_CONFIG"):
        return Path(env_path).expanduser()

    candidates = [
        Path.cwd() / "config" / "config.yaml",
        Path.cwd() / "config.yaml",
        Path.home() / ".pagelens" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            try:
                file_cfg = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config file {path}: {e}") from e
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        _deep_merge(cfg, file_cfg)

    # Env overrides
    if min_relevance := os.environ.get("PAGELENS_MIN_RELEVANCE"):
        try:
            cfg["recommendations"]["min_relevance"] = float(min_relevance)
        except ValueError as e:
            raise ValueError(f"PAGELENS_MIN_RELEVANCE is not a number: {min_relevance!r}") from e

    _validate(cfg)
    return cfg


def _validate(cfg: dict[str, Any]) -> None:
    """Reject malformed sections, bad counts and non-finite thresholds."""
    for section in DEFAULT_CONFIG:
        if not isinstance(cfg[section], dict):
            raise ValueError(f"Config section {section!r} must be a mapping, got {cfg[section]!r}")

    for section, key in (
        ("summary", "max_sentences"),
        ("summary", "max_keywords"),
        ("summary", "max_points"),
        ("grouping", "num_clusters"),
    ):
        require_count(f"{section}.{key}", cfg[section][key])
    if require_count("similarity.ngram_size", cfg["similarity"]["ngram_size"]) < 1:
        raise ValueError("similarity.ngram_size must be at least 1")

    for section, key in (
        ("similarity", "find_threshold"),
        ("grouping", "content_threshold"),
        ("grouping", "combined_threshold"),
        ("recommendations", "min_relevance"),
    ):
        require_finite(f"{section}.{key}", cfg[section][key])


def _deep_merge(base: dict, override: dict) -> None:
    """Merge override into base in-place."""
    for k, v in override.items():
        if k in base and isinstance(base[k], dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
