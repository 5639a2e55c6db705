"""State models for the bookmark shell."""

from .browser_state import BrowserState
from .bookmark_store import BookmarkStore, LockError, get_store, reset_store

__all__ = ["BrowserState", "BookmarkStore", "LockError", "get_store", "reset_store"]
