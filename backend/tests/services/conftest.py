"""Route test fixtures — async DB + FastAPI test client + bearer tokens.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so the readiness probe sees the test engine
    - auth_headers mints real JWTs with the configured secret

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so rows written through the API are visible to test_db and vice versa
    - settings_override swaps get_settings per test for the PATCH policy flags
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

import pairwork.models  # noqa: F401
from pairwork.config import Settings, get_settings
from pairwork.db.base import Base
from pairwork.infrastructure.database import get_db, DatabaseSessionManager
from pairwork.infrastructure.token_auth import issue_token
from pairwork.models.chatroom import Chatroom
from pairwork.models.project import Project
import pairwork.infrastructure.database as db_module
from pairwork.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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


@pytest.fixture
def settings_override():
    """Call with Settings kwargs to change the app's settings for one test."""
    def _apply(**overrides) -> Settings:
        settings = get_settings().model_copy(update=overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings
    return _apply


@pytest.fixture
def auth_headers():
    def _headers(principal_id: str) -> dict:
        return {"Authorization": f"Bearer {issue_token(principal_id)}"}
    return _headers


async def _seed(test_db, model, **fields):
    document = model(**fields)
    test_db.add(document)
    await test_db.commit()
    await test_db.refresh(document)
    return document


@pytest.fixture
async def seed_project(test_db):
    """Single-party project owned by alice."""
    return await _seed(
        test_db, Project, title="Solo", owner="alice", user1="alice",
    )


@pytest.fixture
async def seed_two_party_project(test_db):
    """Project owned by alice with alice and bob as participants."""
    return await _seed(
        test_db, Project, title="Pair", owner="alice",
        user1="alice", user2="bob",
    )


@pytest.fixture
async def seed_chatroom(test_db):
    """Single-party chatroom owned by carol."""
    return await _seed(
        test_db, Chatroom, title="Lobby", owner="carol", user1="carol",
        messages=[{"content": "hello", "owner": "carol"}],
    )
