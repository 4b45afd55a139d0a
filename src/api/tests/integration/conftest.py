"""Integration test fixtures for database tests.

Runs the SQLAlchemy adapters against an in-memory SQLite database through
aiosqlite. A single connection (StaticPool) keeps the schema alive for the
whole test; foreign keys are enforced like they are in PostgreSQL.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from authorization.application.services import AdministrationService, SeedResult
from authorization.infrastructure.administration_repository import (
    AdministrationRepository,
)
from authorization.infrastructure.authorization_store import AuthorizationStore
from authorization.infrastructure.record_repository import RecordRepository
from infrastructure.database.models import Base

import authorization.infrastructure.models  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


def _make_engine() -> AsyncEngine:
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _sqlite_pragmas(dbapi_conn, _):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.close()

    return engine


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Engine with the authorization schema created."""
    engine = _make_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def empty_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Engine whose database has no tables at all."""
    engine = _make_engine()
    yield engine
    await engine.dispose()


@pytest.fixture
def sessionmaker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@pytest_asyncio.fixture
async def admin_session(sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with sessionmaker() as session:
        yield session


@pytest_asyncio.fixture
async def read_session(sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with sessionmaker() as session:
        yield session


@pytest.fixture
def admin_service(admin_session) -> AdministrationService:
    return AdministrationService(
        repository=AdministrationRepository(session=admin_session),
        session=admin_session,
    )


@pytest.fixture
def authorization_store(read_session) -> AuthorizationStore:
    return AuthorizationStore(session=read_session)


@pytest.fixture
def record_repository(read_session) -> RecordRepository:
    return RecordRepository(session=read_session)


@pytest_asyncio.fixture
async def seeded(admin_service) -> SeedResult:
    """Reference dataset loaded through the administration service."""
    return await admin_service.seed()
