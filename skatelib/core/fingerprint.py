# skatelib/core/fingerprint.py
"""
Canonical resource fingerprints

Intent
- Tag resource descriptions (Kubernetes-style manifests) with a content hash so the
  orchestrator can tell whether a resource logically changed.
- The hash is stored on the resource itself as the `skate.io/hash` label.

Canonical form (exact steps)
1) Deep copy the resource (callers' objects are never mutated by fingerprint()).
2) Drop the `skate.io/hash` label (otherwise the hash depends on its previous value).
3) Drop `metadata.generation` (bumped on every update regardless of content).
4) Sort labels and annotations by key; a missing map becomes an empty map.
5) Rebuild every map in (key type, key) order and dump to YAML: identical logical
   content -> byte-identical text, even for maps mixing key types.
6) 64-bit digest of that text, lowercase hex (see skatelib.utils.hashing).

Invariants
- Independent of label/annotation ordering, of generation, and of the prior hash label.
- Any other change (name, namespace, labels, annotations, spec/status payload) changes
  the fingerprint with overwhelming probability.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping, MutableMapping, Optional, Tuple

import yaml

from skatelib.core.errors import SerializationFailure
from skatelib.core.labels import ReservedLabel
from skatelib.utils.hashing import hash64_text

Resource = MutableMapping[str, Any]


def _key_order(k: Any) -> Tuple[str, str]:
    # total order over mixed key types (YAML allows `{1: x, b: y}`)
    return (type(k).__name__, str(k))


def _sorted_map(m: Optional[Mapping[Any, Any]]) -> Dict[Any, Any]:
    return {k: m[k] for k in sorted(m, key=_key_order)} if m else {}


def _canonical(value: Any) -> Any:
    """Rebuild every mapping with keys in _key_order, recursively."""
    if isinstance(value, Mapping):
        return {k: _canonical(v) for k, v in _sorted_map(value).items()}
    if isinstance(value, list):
        return [_canonical(v) for v in value]
    return value


def normalize_resource(resource: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a normalized deep copy of `resource` (steps 1-4 above, all maps key-ordered)."""
    obj = copy.deepcopy(dict(resource))
    meta = dict(obj.get("metadata") or {})

    labels = dict(meta.get("labels") or {})
    labels.pop(ReservedLabel.HASH.key, None)
    meta.pop("generation", None)

    meta["labels"] = _sorted_map(labels)
    meta["annotations"] = _sorted_map(meta.get("annotations"))
    obj["metadata"] = meta
    return _canonical(obj)


def canonical_yaml(resource: Mapping[str, Any]) -> str:
    """
    Canonical YAML text of the normalized resource (the exact input to the hash).

    Raises:
      SerializationFailure: if the resource cannot be normalized or holds values
        YAML cannot represent.
    """
    try:
        obj = normalize_resource(resource)
        return yaml.safe_dump(obj, sort_keys=False, default_flow_style=False, allow_unicode=True)
    except (yaml.YAMLError, TypeError) as e:
        raise SerializationFailure(f"Failed to serialize resource for fingerprinting: {e}") from e


def fingerprint(resource: Mapping[str, Any]) -> str:
    """Content fingerprint of `resource` (16 lowercase hex chars). Does not mutate it."""
    return hash64_text(canonical_yaml(resource))


def stamp(resource: Resource) -> str:
    """
    Compute fingerprint(resource) and store it as the `skate.io/hash` label
    (inserting or overwriting). Returns the fingerprint.
    """
    value = fingerprint(resource)

    meta = resource.get("metadata")
    if meta is None:
        meta = resource["metadata"] = {}
    labels = meta.get("labels")
    if labels is None:
        labels = meta["labels"] = {}
    labels[ReservedLabel.HASH.key] = value
    return value


__all__ = ["Resource", "normalize_resource", "canonical_yaml", "fingerprint", "stamp"]
