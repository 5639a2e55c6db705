"""Tests for application settings."""
import pytest
from pydantic import ValidationError

from bookmark_shell.config import Settings, get_settings


def test__settings__defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BOOKMARK_SHELL_MAX_WORKERS", raising=False)
    monkeypatch.delenv("BOOKMARK_SHELL_APP_NAME", raising=False)
    monkeypatch.delenv("BOOKMARK_SHELL_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "Bookmark Shell"
    assert settings.log_level == "INFO"
    assert settings.max_workers == 4


def test__settings__from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOOKMARK_SHELL_MAX_WORKERS", "8")
    monkeypatch.setenv("BOOKMARK_SHELL_APP_NAME", "My Bookmarks")

    settings = Settings(_env_file=None)

    assert settings.max_workers == 8
    assert settings.app_name == "My Bookmarks"


def test__settings__rejects_zero_workers() -> None:
    with pytest.raises(ValidationError):
        Settings(max_workers=0)


def test__get_settings__cached() -> None:
    assert get_settings() is get_settings()
