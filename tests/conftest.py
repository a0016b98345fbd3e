"""Shared test fixtures and configuration."""

from datetime import datetime, timezone
import os
from pathlib import Path
import sys

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


TEST_ENV = {
    "SECRET_KEY": "test-secret-key",
    "ALGORITHM": "HS256",
    "DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "CREATE_TABLES_ON_STARTUP": "false",
    "LOG_LEVEL": "DEBUG",
}

# Settings are built at import time, so the environment must be ready first
for key, value in TEST_ENV.items():
    os.environ[key] = value

from app.data.database import Base, get_db
from app.main import app
from app.models.database_models.fortune_template import FortuneTemplate
from app.services.auth_services import create_access_token


@pytest_asyncio.fixture
async def engine():
    """A fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        await session.close()


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            await session.close()

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    """Build Authorization headers carrying a signed token for a user id."""

    def build(user_id: str) -> dict:
        token = create_access_token({"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest_asyncio.fixture
async def system_template(db):
    """A seeded, active system template."""
    now = datetime.now(timezone.utc)
    template = FortuneTemplate(
        id="system-1",
        user_id=None,
        title="Opportunity ahead",
        body="A door you thought was closed will open.",
        category="career",
        tone="optimistic",
        is_system=True,
        is_active=True,
        created_at=now,
        updated_at=now,
    )
    db.add(template)
    await db.commit()
    return template


@pytest_asyncio.fixture
async def inactive_system_template(db):
    now = datetime.now(timezone.utc)
    template = FortuneTemplate(
        id="system-retired",
        user_id=None,
        body="An old saying nobody reads anymore.",
        category="general",
        is_system=True,
        is_active=False,
        created_at=now,
        updated_at=now,
    )
    db.add(template)
    await db.commit()
    return template
