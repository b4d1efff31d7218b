"""Pytest configuration.

This configuration ensures:
1. Test environment settings are in place before any application import
2. Each database test gets a fresh in-memory SQLite database (aiosqlite)
3. Lifecycle tests get a controllable clock and a recording notifier
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "10")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.infrastructure.persistence.database import Database  # noqa: E402
from tests.utils.doubles import FakeClock, RecordingNotifier  # noqa: E402


@pytest.fixture
def clock() -> FakeClock:
    """Clock frozen at T0 until the test advances it."""
    return FakeClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest_asyncio.fixture
async def database():
    """Fresh in-memory SQLite database with all tables created."""
    db = Database(database_url="sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real adapters"
    )
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")
