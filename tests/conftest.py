"""Shared fixtures for bookmark shell tests."""
import os

import pytest

# Qt must not need a display when GUI tests run
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from bookmark_shell.config import Settings, get_settings
from bookmark_shell.models.bookmark_store import BookmarkStore, reset_store
from bookmark_shell.services.dispatcher import create_dispatcher


@pytest.fixture(autouse=True)
def _isolate_globals():
    reset_store()
    get_settings.cache_clear()
    yield
    reset_store()
    get_settings.cache_clear()


@pytest.fixture
def store() -> BookmarkStore:
    return BookmarkStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(max_workers=4)


@pytest.fixture
def dispatcher(store, settings):
    dispatcher = create_dispatcher(store, settings)
    yield dispatcher
    dispatcher.shutdown()
