"""Named command dispatch onto a worker thread pool."""

import inspect
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

from ..config import Settings, get_settings
from ..models.bookmark_store import BookmarkStore, get_store
from .commands import DEFAULT_COMMANDS, CommandResult

logger = logging.getLogger(__name__)


class CommandDispatcher:
    """Runs registered commands against one shared store.

    Invocations are submitted to a ThreadPoolExecutor, so any number of
    callers can have commands in flight at once. The store serializes access.
    """

    def __init__(self, store: BookmarkStore, max_workers: int = 4):
        self.store = store
        self.max_workers = max_workers
        self._handlers: Dict[str, Callable[..., CommandResult]] = {}
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="command"
        )
        logger.info("Command dispatcher started with %d workers", max_workers)

    def register(self, name: str, handler: Callable[..., CommandResult]):
        """Register a command handler under a name."""
        if name in self._handlers:
            raise ValueError(f"Command already registered: {name}")
        self._handlers[name] = handler

    def command_names(self) -> List[str]:
        """Get the names of all registered commands."""
        return sorted(self._handlers)

    def invoke(self, name: str, **kwargs) -> "Future[CommandResult]":
        """Submit a command for execution on the worker pool."""
        return self._executor.submit(self._run, name, kwargs)

    def call(self, name: str, **kwargs) -> CommandResult:
        """Run a command and wait for its result."""
        return self.invoke(name, **kwargs).result()

    def _run(self, name: str, kwargs: dict) -> CommandResult:
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning("Unknown command requested: %s", name)
            return CommandResult.failure(f"Unknown command: {name}")

        try:
            inspect.signature(handler).bind(self.store, **kwargs)
        except TypeError as e:
            return CommandResult.failure(f"Invalid arguments for {name}: {e}")

        return handler(self.store, **kwargs)

    def shutdown(self, wait: bool = True):
        """Stop accepting commands and release the worker threads."""
        self._executor.shutdown(wait=wait)
        logger.info("Command dispatcher stopped")

    def __enter__(self) -> "CommandDispatcher":
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()


def create_dispatcher(
    store: Optional[BookmarkStore] = None, settings: Optional[Settings] = None
) -> CommandDispatcher:
    """Create a dispatcher with the default bookmark commands registered."""
    settings = settings or get_settings()
    dispatcher = CommandDispatcher(
        store if store is not None else get_store(),
        max_workers=settings.max_workers,
    )
    for name, handler in DEFAULT_COMMANDS.items():
        dispatcher.register(name, handler)
    return dispatcher
