"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup initializes the database and that a failing
initialization does not prevent the application from starting.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

pytestmark = pytest.mark.asyncio


class TestLifespan:
    async def test_startup_initializes_database(self):
        from webeze.server.main import lifespan

        with patch("webeze.server.main.init_db", new_callable=AsyncMock) as mock_init_db:
            async with lifespan(FastAPI()):
                mock_init_db.assert_awaited_once()

    async def test_startup_survives_database_failure(self):
        from webeze.server.main import lifespan

        with (
            patch("webeze.server.main.init_db", new_callable=AsyncMock, side_effect=RuntimeError("db down")),
            patch("webeze.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

        mock_logger.error.assert_called_once()
        assert "Database initialization failed" in mock_logger.error.call_args[0][0]


class TestInitDb:
    async def test_skips_create_all_by_default(self):
        from webeze.core.database import session as session_module

        with (
            patch.object(session_module.settings, "database_auto_create", False),
            patch("webeze.core.database.session.create_all", new_callable=AsyncMock) as mock_create_all,
        ):
            await session_module.init_db()

        mock_create_all.assert_not_awaited()

    async def test_creates_tables_when_enabled(self):
        from webeze.core.database import session as session_module

        with (
            patch.object(session_module.settings, "database_auto_create", True),
            patch("webeze.core.database.session.create_all", new_callable=AsyncMock) as mock_create_all,
        ):
            await session_module.init_db()

        mock_create_all.assert_awaited_once_with(session_module.engine)


def test_routes_are_mounted():
    from webeze.server.main import app

    paths = set(app.openapi()["paths"])

    assert {
        "/health",
        "/version",
        "/api/v1/auth/register",
        "/api/v1/auth/login",
        "/api/v1/users/me",
        "/api/v1/companies",
        "/api/v1/companies/{company_id}",
        "/api/v1/companies/{company_id}/settings",
        "/api/v1/companies/sub-domains/{sub_domain}/availability",
    } <= paths
