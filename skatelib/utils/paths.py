# skatelib/utils/paths.py
"""
Path helpers (repo-root aware)

Intent
- Make the stamp pipeline independent of the current working directory (CWD).
- Resolve the manifest / output / lock paths in parameters.yaml relative to the repo
  root, inferred from the location of `configs/parameters.yaml`.
"""

from __future__ import annotations

from pathlib import Path


def repo_root_from_parameters_path(parameters_path: str | Path) -> Path:
    """
    Given a path to `configs/parameters.yaml`, return the repo root.

    Works for absolute or relative paths by resolving first.
    Example:
      .../repo/configs/parameters.yaml -> .../repo
    """
    return Path(parameters_path).resolve().parents[1]


def config_base_dir(parameters_path: str | Path) -> Path:
    """
    Directory that relative paths in a parameters file are resolved against.

    - `<repo>/configs/parameters.yaml` -> `<repo>` (repo-root convention)
    - any other location -> the directory holding the file
    """
    p = Path(parameters_path).resolve()
    if p.parent.name == "configs":
        return repo_root_from_parameters_path(p)
    return p.parent


def resolve_path(path_like: str | Path, *, base_dir: str | Path) -> Path:
    """Absolute `path_like`, taken relative to `base_dir` unless already absolute."""
    p = Path(path_like)
    if p.is_absolute():
        return p
    return (Path(base_dir) / p).resolve()


__all__ = ["repo_root_from_parameters_path", "config_base_dir", "resolve_path"]
