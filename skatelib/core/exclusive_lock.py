# skatelib/core/exclusive_lock.py
"""
Exclusive critical-section guard (cross-process advisory file lock).

Platform Support:
    POSIX only (Linux, macOS): uses fcntl.flock().

Runs a caller-supplied computation while holding an exclusive lock on a file, so
that independent tool invocations on the same host never run it concurrently.

Behavior:
- The lock file is created if absent (never truncated, never deleted). Its content
  is irrelevant; only its identity matters.
- Acquisition blocks the calling thread indefinitely. There is no timeout and no
  retry; callers needing bounded waiting wrap the call themselves.
- The lock is released on every exit path, including when the computation raises.
- No fairness: which waiter gets the lock next is up to the OS.

Logging:
    INFO: waiting for lock / locked / unlocked
"""

from __future__ import annotations

import fcntl
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, TypeVar, Union

from skatelib.core.errors import LockAcquisitionFailure, LockReleaseFailure
from skatelib.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
PathLike = Union[str, Path]


@contextmanager
def exclusive_lock(path: PathLike) -> Iterator[Path]:
    """
    Hold an exclusive flock on `path` for the duration of the `with` block.

    Usage:
        with exclusive_lock("/var/lib/skate/apply.lock"):
            # only one process on this host runs this at a time
            ...

    Raises:
      LockAcquisitionFailure: the file could not be opened/created or locked
        (the block does not run).
      LockReleaseFailure: unlocking failed after the block ran.
    """
    lock_path = Path(path)
    try:
        # append mode: create if missing, leave existing content alone
        fh = open(lock_path, "ab")
    except OSError as e:
        raise LockAcquisitionFailure(str(lock_path), f"failed to create/open lock file: {e}") from e

    with fh:
        logger.info("waiting for lock on %s", lock_path)
        try:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX)
        except OSError as e:
            raise LockAcquisitionFailure(str(lock_path), str(e)) from e
        logger.info("locked %s", lock_path)

        try:
            yield lock_path
        finally:
            try:
                fcntl.flock(fh.fileno(), fcntl.LOCK_UN)
            except OSError as e:
                raise LockReleaseFailure(str(lock_path), str(e)) from e
            logger.info("unlocked %s", lock_path)


def with_exclusive_lock(path: PathLike, computation: Callable[[], T]) -> T:
    """
    Call `computation()` exactly once while holding the lock on `path`.

    Returns the computation's value; an exception raised by the computation is
    re-raised after the lock is released. If releasing fails, LockReleaseFailure
    is raised instead (chained to the computation's exception, if any).
    """
    with exclusive_lock(path):
        return computation()


__all__ = ["exclusive_lock", "with_exclusive_lock"]
