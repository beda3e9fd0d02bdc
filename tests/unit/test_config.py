"""Unit tests for Settings validation and the cached get_settings()."""

import pytest
from pydantic import ValidationError

from homeops.core.config import Settings, get_settings


def test_database_url_required(monkeypatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError, match="DATABASE_URL is required"):
        Settings(_env_file=None)


def test_defaults() -> None:
    s = Settings(_env_file=None, database_url="sqlite+aiosqlite://")
    assert s.webhook_timeout_seconds == 30.0
    assert s.default_pause_hours == 24
    assert s.stale_run_timeout_minutes == 60
    assert s.test_run_user_id == "test-user"


@pytest.mark.parametrize(
    "field,value",
    [
        ("webhook_timeout_seconds", 0),
        ("default_pause_hours", 0),
        ("stale_run_timeout_minutes", 0),
    ],
)
def test_numeric_ranges_validated(field: str, value: int) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="sqlite+aiosqlite://", **{field: value})


def test_get_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite://")
    monkeypatch.setenv("DEFAULT_PAUSE_HOURS", "48")
    get_settings.cache_clear()
    try:
        assert get_settings().default_pause_hours == 48
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
