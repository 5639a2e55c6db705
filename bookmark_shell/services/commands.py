"""Command handlers exposed to the shell.

Each handler takes the shared store as its first argument and returns a
CommandResult instead of raising, so the caller can report failures to the user.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from ..models.bookmark_store import BookmarkStore, LockError

logger = logging.getLogger(__name__)

LOCK_FAILURE_MESSAGE = "Failed to lock state"


@dataclass
class CommandResult:
    """Outcome of a single command invocation."""

    ok: bool = True
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "CommandResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "CommandResult":
        return cls(ok=False, error=error)


def add_bookmark(store: BookmarkStore, url: str) -> CommandResult:
    """Append a URL to the bookmark list."""
    try:
        store.append(url)
    except LockError as e:
        logger.error("add_bookmark failed: %s", e)
        return CommandResult.failure(LOCK_FAILURE_MESSAGE)

    logger.debug("Bookmark added: %s", url)
    return CommandResult.success()


def get_bookmarks(store: BookmarkStore) -> CommandResult:
    """Return a copy of all bookmarks in the order they were added."""
    try:
        bookmarks = store.snapshot()
    except LockError as e:
        logger.error("get_bookmarks failed: %s", e)
        return CommandResult.failure(LOCK_FAILURE_MESSAGE)

    return CommandResult.success(bookmarks)


DEFAULT_COMMANDS: Dict[str, Callable[..., CommandResult]] = {
    "add_bookmark": add_bookmark,
    "get_bookmarks": get_bookmarks,
}
