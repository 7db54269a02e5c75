# skatelib/core/labels.py
"""
Reserved labels and resource identity

Intent
- Define the closed set of `skate.io/*` label keys the orchestrator treats specially
  (identity, content hash, topology).
- Provide NamespacedName, the `(name, namespace)` identity of a resource, with its
  `"{name}.{namespace}"` text form.
- Read identity / hash values back out of resource metadata.

Notes
- Reserved keys are always lowercase and live under exactly one prefix.
- Missing identity labels raise MissingIdentityLabels; they never abort the process.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from skatelib.core.errors import MissingIdentityLabels

LABEL_PREFIX = "skate.io/"


class ReservedLabel(Enum):
    """Label keys reserved by skate under the `skate.io/` prefix."""

    NAME = "name"
    NAMESPACE = "namespace"
    HASH = "hash"
    REPLICA = "replica"
    ARCH = "arch"
    DAEMONSET = "daemonset"
    DEPLOYMENT = "deployment"
    NODENAME = "nodename"
    HOSTNAME = "hostname"
    CRONJOB = "cronjob"

    @property
    def key(self) -> str:
        """Full label key, e.g. `skate.io/hash`."""
        return _KEY_BY_LABEL[self]

    @classmethod
    def parse(cls, key: str) -> "ReservedLabel":
        """
        Inverse of `.key`.

        Raises:
          ValueError: if `key` is not one of the reserved label keys.
        """
        label = _LABEL_BY_KEY.get(key)
        if label is None:
            raise ValueError(f"Not a reserved skate label key: {key!r}")
        return label

    def __str__(self) -> str:
        return self.key


_KEY_BY_LABEL: Dict[ReservedLabel, str] = {
    ReservedLabel.NAME: "skate.io/name",
    ReservedLabel.NAMESPACE: "skate.io/namespace",
    ReservedLabel.HASH: "skate.io/hash",
    ReservedLabel.REPLICA: "skate.io/replica",
    ReservedLabel.ARCH: "skate.io/arch",
    ReservedLabel.DAEMONSET: "skate.io/daemonset",
    ReservedLabel.DEPLOYMENT: "skate.io/deployment",
    ReservedLabel.NODENAME: "skate.io/nodename",
    ReservedLabel.HOSTNAME: "skate.io/hostname",
    ReservedLabel.CRONJOB: "skate.io/cronjob",
}
_LABEL_BY_KEY: Dict[str, ReservedLabel] = {v: k for k, v in _KEY_BY_LABEL.items()}


@dataclass(frozen=True)
class NamespacedName:
    """Resource identity. Text form is `"{name}.{namespace}"`."""

    name: str
    namespace: str

    @classmethod
    def parse(cls, text: str) -> "NamespacedName":
        """
        Parse `"{name}.{namespace}"`.

        First dot-separated segment is the name, last segment is the namespace
        (`"a.b.c"` -> name `a`, namespace `c`).

        Raises:
          ValueError: if `text` contains no `.`.
        """
        parts = str(text).split(".")
        if len(parts) < 2:
            raise ValueError(f"Expected '<name>.<namespace>', got: {text!r}")
        return cls(name=parts[0], namespace=parts[-1])

    def __str__(self) -> str:
        return f"{self.name}.{self.namespace}"


# ---------------------------------------------------------------------
# Label accessors
# ---------------------------------------------------------------------


def get_label_value(labels: Optional[Mapping[str, str]], key: str) -> Optional[str]:
    """Value of `key` in `labels`; None when the map or the key is missing."""
    if not labels:
        return None
    return labels.get(key)


def get_reserved_label_value(labels: Optional[Mapping[str, str]], label: ReservedLabel) -> Optional[str]:
    return get_label_value(labels, label.key)


def namespaced_name(metadata: Mapping[str, Any]) -> NamespacedName:
    """
    Identity of a resource read from its reserved `skate.io/name` and
    `skate.io/namespace` labels.

    Raises:
      MissingIdentityLabels: listing every identity key that is absent.
    """
    labels = metadata.get("labels")
    name = get_reserved_label_value(labels, ReservedLabel.NAME)
    ns = get_reserved_label_value(labels, ReservedLabel.NAMESPACE)

    missing = []
    if name is None:
        missing.append(ReservedLabel.NAME.key)
    if ns is None:
        missing.append(ReservedLabel.NAMESPACE.key)
    if missing:
        raise MissingIdentityLabels(missing)

    return NamespacedName(name=name, namespace=ns)


def current_hash(metadata: Mapping[str, Any]) -> str:
    """Stored `skate.io/hash` value, or "" when the resource was never stamped."""
    return get_reserved_label_value(metadata.get("labels"), ReservedLabel.HASH) or ""


def metadata_name(resource: Mapping[str, Any]) -> NamespacedName:
    """namespaced_name() applied to `resource["metadata"]`."""
    return namespaced_name(resource.get("metadata") or {})


__all__ = [
    "LABEL_PREFIX",
    "ReservedLabel",
    "NamespacedName",
    "get_label_value",
    "get_reserved_label_value",
    "namespaced_name",
    "current_hash",
    "metadata_name",
]
