"""Per-library locks that keep long tasks from overlapping."""

from __future__ import annotations

import threading


class LibraryLockManager:
    """Thread-safe registry of libraries currently held by a task."""

    def __init__(self) -> None:
        self._locked: set[int] = set()
        self._mutex = threading.Lock()

    def try_to_lock(self, library_id: int) -> bool:
        """Lock ``library_id``; return False if it was already locked."""
        with self._mutex:
            if library_id in self._locked:
                return False
            self._locked.add(library_id)
            return True

    def is_lock(self, library_id: int) -> bool:
        """Return True when ``library_id`` is locked."""
        with self._mutex:
            return library_id in self._locked

    def unlock_library(self, library_id: int) -> None:
        """Release ``library_id``; releasing an unlocked library does nothing."""
        with self._mutex:
            self._locked.discard(library_id)


DEFAULT_LIBRARY_LOCK_MANAGER = LibraryLockManager()