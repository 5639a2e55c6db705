"""Test helpers shared across modules."""
import pytest

from bookmark_shell.models.bookmark_store import BookmarkStore


def poison(store: BookmarkStore) -> None:
    """Simulate a holder that crashed inside a critical section."""
    with pytest.raises(RuntimeError, match="holder crashed"):
        with store._guard():
            raise RuntimeError("holder crashed")
