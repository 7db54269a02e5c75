# skatelib/utils/hashing.py
"""
Hashing utilities (64-bit content digests)

Intent
- Provide the small hashing helpers behind resource fingerprints and input-file digests.
- Keep hashing logic centralized so every caller renders digests the same way.

Notes
- BLAKE2b truncated to 8 bytes (64 bits), rendered as 16 lowercase hex chars.
- Intended for change detection and naming, not cryptographic security: collisions
  are detectable in practice but the digest is too short to resist attacks.
"""

from __future__ import annotations

from hashlib import blake2b
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

DIGEST_SIZE = 8


def hash64_bytes(b: bytes) -> str:
    """64-bit hex digest of raw bytes."""
    return blake2b(b, digest_size=DIGEST_SIZE).hexdigest()


def hash64_text(s: str) -> str:
    """
    64-bit hex digest of a text string (UTF-8, replacement on errors).
    """
    return hash64_bytes(s.encode("utf-8", errors="replace"))


def hash64_file(path: PathLike) -> str:
    """
    64-bit hex digest of a file's raw bytes.
    """
    p = Path(path)
    return hash64_bytes(p.read_bytes())


__all__ = ["DIGEST_SIZE", "hash64_bytes", "hash64_text", "hash64_file"]
