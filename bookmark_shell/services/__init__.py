"""Command handlers and dispatch for the bookmark shell."""

from .commands import CommandResult, add_bookmark, get_bookmarks, DEFAULT_COMMANDS
from .dispatcher import CommandDispatcher, create_dispatcher

__all__ = [
    "CommandResult",
    "add_bookmark",
    "get_bookmarks",
    "DEFAULT_COMMANDS",
    "CommandDispatcher",
    "create_dispatcher",
]
