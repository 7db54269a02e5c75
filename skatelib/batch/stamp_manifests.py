# skatelib/batch/stamp_manifests.py
"""
Stamp manifests: fingerprint + write (batch entrypoint)

Thin orchestrator around the skate primitives.

Responsibilities:
- Load `configs/parameters.yaml` and resolve its paths against the repo root
- Configure logging and ensure output directories exist
- Read every resource from the input manifest file
- Stamp each resource with its content fingerprint (`skate.io/hash` label)
- Under the exclusive lock, write each stamped resource to:
    <output_dir>/<file_prefix>-<slug(name.namespace)>-<fingerprint>.yaml

Change detection:
- A resource whose incoming `skate.io/hash` label already equals its fingerprint is
  counted as unchanged (it is still written; the file name is content-addressed).

Identity:
- Every resource must carry `skate.io/name` and `skate.io/namespace` labels;
  otherwise MissingIdentityLabels is raised before anything is written.
  Identities are resolved for all resources before any of them is stamped.

Provenance:
- The raw input file digest (hash64_file) is logged and returned in StampResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from skatelib.core.errors import MissingIdentityLabels
from skatelib.core.exclusive_lock import with_exclusive_lock
from skatelib.core.fingerprint import stamp
from skatelib.core.labels import NamespacedName, current_hash, metadata_name
from skatelib.core.slug import slugify
from skatelib.io.manifests import read_manifests, write_manifest
from skatelib.utils.config import ensure_dirs, load_parameters, resolve_config_paths
from skatelib.utils.hashing import hash64_file
from skatelib.utils.logging import configure_logging_from_params, get_logger
from skatelib.utils.paths import config_base_dir

logger = get_logger(__name__)


@dataclass
class StampResult:
    written: List[Path] = field(default_factory=list)
    changed: int = 0
    unchanged: int = 0
    input_digest: str = ""


def manifest_file_name(prefix: str, nn: NamespacedName, fingerprint: str) -> str:
    """`<prefix>-<slug(name.namespace)>-<fingerprint>.yaml`"""
    return f"{prefix}-{slugify(str(nn))}-{fingerprint}.yaml"


def stamp_resources(resources: Sequence[Dict[str, Any]]) -> Tuple[List[Tuple[NamespacedName, str]], int]:
    """
    Stamp resources in place.

    Returns ([(identity, fingerprint), ...], number_of_unchanged_resources).

    Raises:
      MissingIdentityLabels: if any resource lacks identity labels. No resource is
        stamped in that case.
    """
    identities: List[NamespacedName] = []
    for i, res in enumerate(resources):
        try:
            identities.append(metadata_name(res))
        except MissingIdentityLabels as e:
            logger.error("Resource #%s has no skate identity: %s", i, e)
            raise

    stamped: List[Tuple[NamespacedName, str]] = []
    unchanged = 0
    for nn, res in zip(identities, resources):
        previous = current_hash(res.get("metadata") or {})
        fp = stamp(res)
        if previous == fp:
            unchanged += 1
        logger.debug("Stamped %s hash=%s previous=%s", nn, fp, previous or "-")
        stamped.append((nn, fp))
    return stamped, unchanged


def stamp_manifests(
    *,
    input_path: str | Path,
    output_dir: str | Path,
    lock_path: str | Path,
    file_prefix: str = "skate",
) -> StampResult:
    """Read, stamp and write every resource in `input_path` (see module docstring)."""
    resources = read_manifests(input_path)
    input_digest = hash64_file(input_path)
    logger.info("Read %s resources from %s (digest=%s)", len(resources), input_path, input_digest)
    stamped, unchanged = stamp_resources(resources)

    out_dir = Path(output_dir)
    targets = [
        (out_dir / manifest_file_name(file_prefix, nn, fp), res)
        for (nn, fp), res in zip(stamped, resources)
    ]

    def _write_all() -> List[Path]:
        return [write_manifest(path, res) for path, res in targets]

    written = with_exclusive_lock(lock_path, _write_all)
    return StampResult(
        written=written,
        changed=len(resources) - unchanged,
        unchanged=unchanged,
        input_digest=input_digest,
    )


def main(*, parameters_path: str = "configs/parameters.yaml") -> int:
    """Run the stamp pipeline end-to-end. Returns 0 on success (CLI-friendly)."""

    params = load_parameters(parameters_path)
    params = resolve_config_paths(params, base_dir=config_base_dir(parameters_path))

    configure_logging_from_params(params, level=params.run.log_level, log_file=params.run.log_file)
    ensure_dirs(params)

    result = stamp_manifests(
        input_path=params.manifests.input_path,
        output_dir=params.manifests.output_dir,
        lock_path=params.lock.path,
        file_prefix=params.manifests.file_prefix,
    )

    logger.info(
        "Stamp completed: written=%s changed=%s unchanged=%s input_digest=%s output_dir=%s",
        len(result.written),
        result.changed,
        result.unchanged,
        result.input_digest,
        params.manifests.output_dir,
    )
    return 0


__all__ = ["StampResult", "manifest_file_name", "stamp_resources", "stamp_manifests", "main"]
