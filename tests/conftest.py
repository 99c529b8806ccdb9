"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator
from typing import Any

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

from infrastructure.backend import Backend
from infrastructure.database.models import Base
from infrastructure.storage.supabase_storage import SupabaseStorage


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_SUPABASE_URL = "https://project.supabase.co"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def storage_requests() -> list[httpx.Request]:
    """Requests received by the fake Supabase Storage endpoint."""
    return []


@pytest.fixture
async def storage(
    storage_requests: list[httpx.Request],
) -> AsyncGenerator[SupabaseStorage, None]:
    """Supabase Storage client wired to an in-process fake of the REST API."""

    def handler(request: httpx.Request) -> httpx.Response:
        storage_requests.append(request)
        if request.method == "POST":
            key = request.url.path.split("/storage/v1/object/", 1)[1]
            return httpx.Response(200, json={"Key": key, "Id": "object-id"})
        if request.method == "DELETE":
            return httpx.Response(200, json=[])
        return httpx.Response(404, json={"error": "not_found", "message": "Object not found"})

    client = SupabaseStorage(
        TEST_SUPABASE_URL,
        "service-role-key",
        transport=httpx.MockTransport(handler),
    )
    yield client
    await client.close()


@pytest.fixture
def backend(
    session_factory: async_sessionmaker[AsyncSession],
    storage: SupabaseStorage,
) -> Backend:
    return Backend(session_factory=session_factory, storage=storage)


async def _client_for(backend: Backend) -> AsyncGenerator[AsyncClient, None]:
    from api.dependencies.services import get_backend
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_backend] = lambda: backend

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def client(backend: Backend) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client backed by a configured Backend.

    This client:
    - Uses an in-memory SQLite database
    - Sends storage calls to an httpx MockTransport
    - Overrides the Backend dependency instead of running the lifespan
    """
    async for c in _client_for(backend):
        yield c


@pytest.fixture
async def unconfigured_client() -> AsyncGenerator[AsyncClient, None]:
    """Test client whose Backend has neither database nor storage credentials."""
    async for c in _client_for(Backend()):
        yield c
