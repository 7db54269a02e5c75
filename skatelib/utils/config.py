# skatelib/utils/config.py
"""
Config Loader: skatelib (Typed YAML Config)

Intent
- Load and validate configs/parameters.yaml.
- Return a typed configuration object (Pydantic v2), used as the single source of truth
  for the stamp pipeline (input manifests, output directory, lock file, logging).

What this module guarantees
- Strict validation: invalid configs fail fast with actionable Pydantic errors.
- Unicode whitespace hardening BEFORE YAML parse: NBSP/BOM/narrow NBSP normalized.
- Minimal filesystem setup via ensure_dirs() for the output directory and the lock
  file's parent directory.
- Missing blocks fall back to model defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from skatelib.core.slug import is_slug
from skatelib.utils.logging import get_logger
from skatelib.utils.paths import resolve_path


# -----------------------------
# Parameter models
# -----------------------------


class RunConfig(BaseModel):
    """Top-level runtime metadata (name/logging)."""
    name: str = "skate_stamp"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        lvl = str(v).upper()
        if not isinstance(logging.getLevelName(lvl), int):
            raise ValueError(f"run.log_level must be a logging level name, got: {v!r}")
        return lvl


class ManifestsConfig(BaseModel):
    """Where the stamp pipeline reads manifests from and writes stamped copies to."""
    input_path: str = "manifests/input.yaml"
    output_dir: str = "artifacts/manifests"
    file_prefix: str = "skate"

    @field_validator("file_prefix")
    @classmethod
    def _validate_file_prefix(cls, v: str) -> str:
        if not is_slug(v):
            raise ValueError(f"manifests.file_prefix must be a slug (a-z, 0-9, single '-'), got: {v!r}")
        return v


class LockConfig(BaseModel):
    """Lock file serializing writes into manifests.output_dir across processes."""
    path: str = "artifacts/locks/stamp.lock"

    @field_validator("path")
    @classmethod
    def _validate_path(cls, v: str) -> str:
        if not str(v).strip():
            raise ValueError("lock.path must not be empty")
        return v


class ParametersConfig(BaseModel):
    """Top-level typed view of parameters.yaml."""
    run: RunConfig = Field(default_factory=RunConfig)
    manifests: ManifestsConfig = Field(default_factory=ManifestsConfig)
    lock: LockConfig = Field(default_factory=LockConfig)


# -----------------------------
# YAML helpers
# -----------------------------

_BAD_WHITESPACE = ["\u00A0", "\u2007", "\u202F", "\uFEFF"]


def _load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"YAML file not found: {str(path)}")

    raw = p.read_text(encoding="utf-8")

    for ch in _BAD_WHITESPACE:
        raw = raw.replace(ch, " ")

    data = yaml.safe_load(raw) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping/object: {str(path)}")
    return data


def load_parameters(path: str | Path = "configs/parameters.yaml") -> ParametersConfig:
    """Load parameters.yaml and return a validated typed ParametersConfig."""
    logger = get_logger(__name__)
    raw = _load_yaml(path)
    try:
        return ParametersConfig.model_validate(raw)
    except ValidationError as e:
        logger.error("Invalid parameters.yaml: %s", e)
        raise


def resolve_config_paths(params: ParametersConfig, *, base_dir: str | Path) -> ParametersConfig:
    """
    Return a copy of `params` with every filesystem path made absolute against `base_dir`.

    Already-absolute paths are kept as-is.
    """
    data = params.model_dump()
    data["manifests"]["input_path"] = str(resolve_path(params.manifests.input_path, base_dir=base_dir))
    data["manifests"]["output_dir"] = str(resolve_path(params.manifests.output_dir, base_dir=base_dir))
    data["lock"]["path"] = str(resolve_path(params.lock.path, base_dir=base_dir))
    if params.run.log_file:
        data["run"]["log_file"] = str(resolve_path(params.run.log_file, base_dir=base_dir))
    return ParametersConfig.model_validate(data)


def ensure_dirs(params: ParametersConfig) -> None:
    """
    Ensure configured directories exist.

    Creates:
    - manifests.output_dir
    - parent dir for lock.path
    - parent dir for run.log_file (if set)
    """
    dirs = [
        params.manifests.output_dir,
        str(Path(params.lock.path).parent),
    ]
    if params.run.log_file:
        dirs.append(str(Path(params.run.log_file).parent))

    for d in dirs:
        if d:
            Path(d).mkdir(parents=True, exist_ok=True)


__all__ = [
    "RunConfig",
    "ManifestsConfig",
    "LockConfig",
    "ParametersConfig",
    "load_parameters",
    "resolve_config_paths",
    "ensure_dirs",
]
