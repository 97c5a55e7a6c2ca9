"""Load document batches from JSON/YAML files or directories of pages."""

import json
import re
from pathlib import Path
from typing import Any

import yaml

from ..models import Document

BATCH_EXTENSIONS = {".json", ".yaml", ".yml"}
PAGE_EXTENSIONS = {".md", ".markdown", ".txt", ".text"}

FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n", re.DOTALL)
HEADING_RE = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def load_documents(path: str | Path) -> list[Document]:
    """Load a batch of documents.

    Args:
        path: A .json/.yaml file holding a list of document mappings, a
            single .md/.txt page, or a directory of such pages.

    Returns:
        Documents in file order. Missing ids default to the batch index,
        or for pages to the path relative to the loaded directory without
        its extension.

    Raises:
        ValueError: If the path is missing, its contents are malformed or
            two documents share an id.
    """
    path = Path(path)
    if path.is_dir():
        files = [
            p for p in sorted(path.rglob("*"))
            if p.is_file() and not p.name.startswith(".") and p.suffix.lower() in PAGE_EXTENSIONS
        ]
        return _check_unique_ids([_parse_page(p, i, root=path) for i, p in enumerate(files)], path)

    if not path.is_file():
        raise ValueError(f"Path not found: {path}")

    ext = path.suffix.lower()
    if ext in BATCH_EXTENSIONS:
        return _check_unique_ids(_parse_batch(path), path)
    if ext in PAGE_EXTENSIONS:
        return [_parse_page(path, 0)]
    raise ValueError(f"Unsupported file type: {path.suffix}")


def _check_unique_ids(documents: list[Document], source: Path) -> list[Document]:
    seen = set()
    for doc in documents:
        if doc.id in seen:
            raise ValueError(f"Duplicate document id {doc.id!r} in {source}")
        seen.add(doc.id)
    return documents


def document_from_mapping(data: dict[str, Any], index: int) -> Document:
    """Build a Document from a mapping with text/title/keywords/links keys."""
    if not isinstance(data, dict):
        raise ValueError(f"Document {index} must be a mapping, got {type(data).__name__}")

    keywords = data.get("keywords") or []
    links = data.get("links") or []
    if isinstance(keywords, str):
        keywords = [k.strip() for k in keywords.split(",") if k.strip()]
    if not isinstance(keywords, list) or not isinstance(links, list):
        raise ValueError(f"Document {index}: keywords and links must be lists")

    doc_id = data.get("id", index)
    if isinstance(doc_id, bool) or not isinstance(doc_id, (str, int)):
        raise ValueError(f"Document {index}: id must be a string or integer, got {doc_id!r}")

    return Document(
        id=doc_id,
        text=str(data.get("text") or ""),
        title=str(data.get("title") or ""),
        keywords=[str(k) for k in keywords],
        links=[str(link) for link in links],
    )


def _parse_batch(path: Path) -> list[Document]:
    text = path.read_text(encoding="utf-8", errors="replace")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Could not parse {path}: {e}") from e

    # Accept either a bare list or {"documents": [...]}
    if isinstance(data, dict) and "documents" in data:
        data = data["documents"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a list of documents")

    return [document_from_mapping(item, i) for i, item in enumerate(data)]


def _parse_page(file_path: Path, index: int, root: Path | None = None) -> Document:
    """Parse a markdown or text page, reading YAML frontmatter if present."""
    text = file_path.read_text(encoding="utf-8", errors="replace")
    metadata: dict[str, Any] = {}

    fm_match = FRONTMATTER_RE.match(text)
    if fm_match:
        try:
            fm = yaml.safe_load(fm_match.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Bad frontmatter in {file_path}: {e}") from e
        if isinstance(fm, dict):
            metadata.update(fm)
        text = text[fm_match.end():]

    if "title" not in metadata:
        title_match = HEADING_RE.search(text)
        if title_match:
            metadata["title"] = title_match.group(1).strip()
        else:
            first_line = text.split("\n", 1)[0].strip()
            # Try first line as title if short enough
            metadata["title"] = first_line if first_line and len(first_line) < 120 else file_path.stem

    metadata["text"] = text.strip()
    if "id" not in metadata:
        # a/readme.md and b/readme.md must not collide
        rel = file_path.relative_to(root) if root else Path(file_path.name)
        metadata["id"] = rel.with_suffix("").as_posix()
    return document_from_mapping(metadata, index)
