"""Database Session Manager - error mapping, health check, singleton dependency.

Tests:
    - SQLAlchemy errors inside a session surface as DatabaseError
    - health_check() true against a live SQLite database
    - create_all() builds the messages table
    - get_db refuses to run before init_db
"""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from message_board.core.errors import DatabaseError
from message_board.infrastructure import database as db_module
from message_board.infrastructure.database import DatabaseSessionManager, get_db


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.close()


async def test_health_check_ok(manager):
    assert await manager.health_check() is True


async def test_create_all_builds_messages_table(manager):
    await manager.create_all()
    async with manager.session() as db:
        result = await db.execute(text("SELECT COUNT(*) FROM messages"))
        assert result.scalar_one() == 0


async def test_operational_error_mapped(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.http_status == 503
    assert exc_info.value.operation == "execute"


async def test_raised_sqlalchemy_error_mapped(manager):
    with pytest.raises(DatabaseError):
        async with manager.session():
            raise OperationalError("SELECT 1", {}, Exception("gone"))


async def test_get_db_requires_init(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError):
        await get_db().__anext__()


def test_init_db_sets_singleton(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    m = db_module.init_db("sqlite+aiosqlite:///:memory:", pool_size=5)
    assert db_module.db_manager is m
