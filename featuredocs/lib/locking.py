"""
Lock management for featuredocs.

Uses flock for per-feature locking so two invocations cannot interleave
their read-modify-write of the same feature's documents.
"""

import fcntl
import os
import time
from contextlib import contextmanager
from pathlib import Path

from featuredocs.errors import LockTimeout

POLL_INTERVAL = 0.1


@contextmanager
def _acquire_lock(lock_file: Path, timeout: float, lock_name: str):
    """
    Internal helper to acquire a file lock.

    Lock files are never deleted. Deleting them lets two processes hold
    "exclusive" locks on different inodes at the same path.
    """
    lock_file.parent.mkdir(parents=True, exist_ok=True)

    fd = open(lock_file, 'w')
    start = time.monotonic()

    try:
        while True:
            try:
                fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except BlockingIOError:
                if time.monotonic() - start >= timeout:
                    raise LockTimeout(f"Could not acquire {lock_name} within {timeout}s") from None
                time.sleep(POLL_INTERVAL)

        fd.write(f"{os.getpid()}\n")
        fd.flush()
        try:
            yield
        finally:
            fcntl.flock(fd, fcntl.LOCK_UN)
    finally:
        fd.close()


@contextmanager
def feature_lock(locks_dir: Path, feature_id: str, timeout: float = 10):
    """
    Acquire per-feature lock, yield, release on exit.

    Different features never block each other.
    """
    lock_file = locks_dir / f"{feature_id}.lock"
    with _acquire_lock(lock_file, timeout, f"lock for {feature_id}"):
        yield
