# skatelib/core/errors.py
"""
Error taxonomy for the skate primitives.

Every error here is raised to the immediate caller. Nothing in skatelib retries,
logs-and-swallows, or exits the process on these conditions.
"""

from __future__ import annotations

from typing import Sequence


class SkateError(Exception):
    """Base class for all skatelib errors."""


class SerializationFailure(SkateError):
    """A resource could not be rendered to its canonical text form."""


class LockAcquisitionFailure(SkateError):
    """The lock file could not be opened/created or the OS refused the lock.

    Raised before the guarded computation runs.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to acquire lock on {path}: {reason}")
        self.path = path
        self.reason = reason


class LockReleaseFailure(SkateError):
    """Unlocking failed after the guarded computation already ran.

    The computation's side effects have taken effect; exclusivity bookkeeping
    for the lock file may be compromised.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(f"failed to release lock on {path}: {reason}")
        self.path = path
        self.reason = reason


class MissingIdentityLabels(SkateError):
    """Resource metadata lacks the reserved name/namespace labels."""

    def __init__(self, missing: Sequence[str]):
        self.missing = tuple(missing)
        super().__init__(f"metadata missing identity labels: {', '.join(self.missing)}")


__all__ = [
    "SkateError",
    "SerializationFailure",
    "LockAcquisitionFailure",
    "LockReleaseFailure",
    "MissingIdentityLabels",
]
