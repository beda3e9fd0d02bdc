"""Pytest configuration and fixtures for homeops.

DB fixtures run against in-memory SQLite (aiosqlite) with a single shared
connection, so every session and store in a test sees the same database.
Tables are created from the ORM metadata per test.
"""

import os

# Settings require DATABASE_URL; set before anything calls get_settings().
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncIterator

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import homeops.infrastructure.persistence.models  # noqa: F401
from homeops.domain.entities.automation import AutomationEntity
from homeops.infrastructure.persistence.database import Base

TENANT_ID = "hh_test"


@pytest.fixture
async def db_engine() -> AsyncIterator[AsyncEngine]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Rolled back after the test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def make_automation():
    """Factory for in-memory (not persisted) automations used by unit tests."""

    def _make(**overrides) -> AutomationEntity:
        fields = {
            "id": "auto_1",
            "tenant_id": TENANT_ID,
            "name": "Test automation",
            "trigger": "task-overdue",
            "actions": [],
            "created_by": "user_owner",
        }
        fields.update(overrides)
        return AutomationEntity(**fields)

    return _make
