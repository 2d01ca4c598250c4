"""Root conftest - shared test configuration and fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The Transform Service is an httpx.MockTransport handler, never a socket
    - get_db / get_transform_client dependencies overridden for route tests
"""

import json
import os

# Ensure tests never reach a real database or processor
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("TRANSFORM_SERVICE_URL", "http://processor.test/process")

import httpx  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)

from message_board.db.base import Base  # noqa: E402
from message_board.infrastructure import database as db_module  # noqa: E402
from message_board.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db,
)
from message_board.infrastructure.transform_client import (  # noqa: E402
    ResilientTransformClient, get_transform_client,
)
from message_board.main import app  # noqa: E402

PROCESSOR_URL = "http://processor.test/process"


class FakeTransformService:
    """Stand-in processor: upper-cases by default, records every request body.

    Set `responder` to a callable(raw, request) -> httpx.Response (or raise
    an httpx exception) to script other behaviour.
    """

    def __init__(self):
        self.requests: list[dict] = []
        self.responder = lambda raw, request: httpx.Response(
            200, json={"processed_message": raw.upper()},
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)
        return self.responder(body["message"], request)


@pytest.fixture
def transform_service():
    return FakeTransformService()


@pytest.fixture
async def transform_client(transform_service):
    client = ResilientTransformClient(
        PROCESSOR_URL,
        timeout_seconds=1.0,
        max_retries=2,
        base_delay_ms=0,
        transport=httpx.MockTransport(transform_service),
    )
    yield client
    await client.close()


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory, transform_client):
    """FastAPI test client with DB and Transform Service overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_transform_client] = lambda: transform_client

    # Readiness probe reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
