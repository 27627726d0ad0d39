"""Test configuration for database unit tests.

Provides sample entity data, and an in-memory SQLite session for the tests
that exercise real SQL.
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from webeze.core.database import create_all


@pytest.fixture(scope="function")
async def in_memory_engine() -> AsyncGenerator:
    """Create in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
async def in_memory_session(in_memory_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create in-memory SQLite session for testing."""
    session_maker = async_sessionmaker(in_memory_engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        yield session


@pytest.fixture
def sample_user_data() -> dict:
    return {
        "email": "owner@example.com",
        "password_hash": "pbkdf2_sha256$1000$c2FsdA==$aGFzaA==",
        "first_name": "Ada",
        "last_name": "Lovelace",
    }


@pytest.fixture
def sample_company_data() -> dict:
    return {
        "name": "Acme",
        "sub_domain": "acme",
        "settings_id": 1,
        "user_id": 1,
    }
