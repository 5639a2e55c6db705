"""Thread-safe in-memory bookmark store."""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .browser_state import BrowserState

logger = logging.getLogger(__name__)


class LockError(RuntimeError):
    """Raised when the store's guard was poisoned by an earlier failed holder."""


class BookmarkStore:
    """Ordered, append-only collection of bookmark URLs guarded by a single lock.

    Every read and write of the underlying list happens while the lock is held.
    Readers only ever receive copies, so a returned snapshot never changes.

    If an exception escapes a critical section, the store is marked poisoned
    and all later calls raise LockError. Poisoning is never cleared.
    """

    def __init__(self, state: Optional[BrowserState] = None):
        """Initialize the store.

        Args:
            state: Initial browser state. If None, starts empty.
        """
        self._state = state if state is not None else BrowserState()
        self._lock = threading.Lock()
        self._poisoned = False

    @contextmanager
    def _guard(self) -> Iterator[BrowserState]:
        """Hold the lock for the duration of a critical section."""
        with self._lock:
            if self._poisoned:
                raise LockError("Bookmark store lock is poisoned")
            try:
                yield self._state
            except BaseException:
                self._poisoned = True
                logger.error("Bookmark store poisoned by a failed critical section")
                raise

    @property
    def is_poisoned(self) -> bool:
        """Whether an earlier holder left the store in an unusable state."""
        with self._lock:
            return self._poisoned

    def append(self, item: str) -> None:
        """Add a bookmark to the end of the collection."""
        with self._guard() as state:
            state.bookmarks.append(item)

    def snapshot(self) -> List[str]:
        """Get a point-in-time copy of all bookmarks in insertion order."""
        with self._guard() as state:
            return list(state.bookmarks)

    def __len__(self) -> int:
        with self._guard() as state:
            return len(state.bookmarks)


# Global store instance
_store: Optional[BookmarkStore] = None


def get_store() -> BookmarkStore:
    """Get or create the global bookmark store."""
    global _store
    if _store is None:
        _store = BookmarkStore()
    return _store


def reset_store():
    """Reset the global store instance (mainly for testing)."""
    global _store
    _store = None
