# skatelib/io/manifests.py
"""
Manifest readers / writers (YAML, multi-document)

Intent
- Read resource descriptions (Kubernetes-style manifests) from a YAML file that may
  hold several `---`-separated documents.
- Write a single resource back as YAML.

Key behaviors / guarantees
- File existence checks raise FileNotFoundError with a clear path.
- Empty documents (e.g. a trailing `---`) are skipped.
- Every remaining document must be a mapping with a `metadata` mapping; anything
  else raises ValueError naming the document index.
- Written YAML keeps the resource's own key order (human-friendly); canonical
  ordering is only applied when fingerprinting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml


def read_manifests(path: str | Path, encoding: str = "utf-8") -> List[Dict[str, Any]]:
    """
    Read all resources from a (multi-document) YAML manifest file.

    Raises:
      FileNotFoundError: if the file does not exist.
      ValueError: if YAML is invalid or a document is not a resource mapping.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Manifest file not found: {p}")

    text = p.read_text(encoding=encoding)
    try:
        docs = list(yaml.safe_load_all(text))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {p}: {e}") from e

    resources: List[Dict[str, Any]] = []
    for i, doc in enumerate(docs):
        if doc is None:
            continue
        if not isinstance(doc, dict):
            raise ValueError(f"Document {i} in {p} must be a mapping, got {type(doc).__name__}")
        meta = doc.get("metadata")
        if meta is not None and not isinstance(meta, dict):
            raise ValueError(f"Document {i} in {p}: metadata must be a mapping")
        resources.append(doc)
    return resources


def dump_manifest(resource: Mapping[str, Any]) -> str:
    """YAML text for a single resource (key order preserved)."""
    return yaml.safe_dump(dict(resource), sort_keys=False, default_flow_style=False, allow_unicode=True)


def write_manifest(path: str | Path, resource: Mapping[str, Any], encoding: str = "utf-8") -> Path:
    """Write `resource` to `path` as YAML. Returns the written Path."""
    p = Path(path)
    p.write_text(dump_manifest(resource), encoding=encoding)
    return p


__all__ = ["read_manifests", "dump_manifest", "write_manifest"]
