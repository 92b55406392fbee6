"""Database session manager — rollback and error mapping."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from fincalc.core.errors import DuplicateEmailError, InternalError
from fincalc.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await m.create_all()
    yield m
    await m.dispose()


async def test_health_check_passes(manager):
    assert await manager.health_check() is True


async def test_create_all_builds_both_tables(manager):
    async with manager.session() as db:
        await db.execute(text("SELECT id, email FROM users"))
        await db.execute(text("SELECT id, user_id FROM financials"))


async def test_sqlalchemy_error_mapped_to_internal_error(manager):
    with pytest.raises(InternalError) as exc_info:
        async with manager.session():
            raise OperationalError("SELECT 1", {}, Exception("gone"))
    assert exc_info.value.operation == "execute"


async def test_domain_errors_pass_through(manager):
    with pytest.raises(DuplicateEmailError):
        async with manager.session():
            raise DuplicateEmailError("a@b.c")
