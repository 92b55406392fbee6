"""Service test fixtures — in-memory repositories, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness checks hit the test engine
    - Fake repositories enforce email uniqueness inside insert (like the DB constraint)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - Fakes over mocks for store tests: behavior (uniqueness, ordering) is what we assert
"""

import asyncio
from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import fincalc.models  # noqa: F401
from fincalc.core.domain_types import AccountId, ProfileId
from fincalc.core.errors import DuplicateEmailError
from fincalc.core.records import Account, FinancialProfile
from fincalc.db.base import Base
from fincalc.infrastructure.database import get_db, DatabaseSessionManager
import fincalc.infrastructure.database as db_module
from fincalc.main import app


# -- In-memory repositories ----------------------------------------------------


class FakeAccountRepository:
    """AccountRepository double. Uniqueness checked and written under one lock."""

    def __init__(self):
        self.rows: dict[int, Account] = {}
        self.calls: list[str] = []
        self._lock = asyncio.Lock()
        self._next_id = 1

    async def insert(self, email: str, password: str) -> Account:
        self.calls.append("insert")
        await asyncio.sleep(0)  # let concurrent callers interleave
        async with self._lock:
            if any(a.email == email for a in self.rows.values()):
                raise DuplicateEmailError(email)
            account = Account(
                id=AccountId(self._next_id), email=email, password=password,
                created_at=datetime.now(timezone.utc),
            )
            self.rows[account.id] = account
            self._next_id += 1
            return account

    async def get_by_id(self, account_id: AccountId) -> Account | None:
        self.calls.append("get_by_id")
        return self.rows.get(account_id)

    async def get_by_email(self, email: str) -> Account | None:
        self.calls.append("get_by_email")
        return next((a for a in self.rows.values() if a.email == email), None)


class FakeFinancialProfileRepository:
    def __init__(self):
        self.rows: list[FinancialProfile] = []

    async def insert(
        self, user_id: int, values: dict[str, float | None],
    ) -> FinancialProfile:
        profile = FinancialProfile(
            id=ProfileId(len(self.rows) + 1), user_id=user_id,
            created_at=datetime.now(timezone.utc), **values,
        )
        self.rows.append(profile)
        return profile

    async def list_by_user(self, user_id: int) -> list[FinancialProfile]:
        return [p for p in self.rows if p.user_id == user_id]


class SlowRepository:
    """Every call outlasts any reasonable test timeout."""

    def __init__(self, delay: float = 5.0):
        self._delay = delay

    async def _stall(self, *args, **kwargs):
        await asyncio.sleep(self._delay)

    insert = get_by_id = get_by_email = list_by_user = _stall


@pytest.fixture
def account_repo():
    return FakeAccountRepository()


@pytest.fixture
def profile_repo():
    return FakeFinancialProfileRepository()


@pytest.fixture
def slow_repo():
    return SlowRepository()


# -- Database + HTTP client ----------------------------------------------------


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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
