"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that asks for the database gets a fresh in-memory SQLite
    - The FastAPI client talks to the app in-process; lifespan does not run,
      so the fixture installs the test DatabaseSessionManager on app.state
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
async def client(db_manager):
    """FastAPI test client backed by the in-memory database."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.state.db_manager = None
