from typing import AsyncGenerator, Awaitable, Callable, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from webeze.core.database import create_all

# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

REGISTER_PAYLOAD = {
    "company": "Acme",
    "email": "owner@example.com",
    "password": "S3cure!pass",
    "confirmPassword": "S3cure!pass",
}


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(name="session")
async def session_fixture(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture(name="client")
async def client_fixture(session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the test database."""
    from webeze.core.database import get_session
    from webeze.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def register_account(client: AsyncClient) -> Callable[..., Awaitable[Dict]]:
    """Register accounts through the API. Keyword arguments override the default form."""

    async def _register(**overrides) -> Dict:
        payload = {**REGISTER_PAYLOAD, **overrides}
        response = await client.post("/api/v1/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest_asyncio.fixture
async def registered(register_account) -> Dict:
    """An account registered with the default payload."""
    return await register_account()


@pytest_asyncio.fixture
async def auth_headers(registered: Dict) -> Dict[str, str]:
    return {"Authorization": f"Bearer {registered['access_token']}"}
