"""
Mini Study Notes Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── repository:   fresh InMemoryUserRepository
    ├── locks:        fresh UsernameLocks table
    ├── service:      StudyNotesService over repository + locks
    ├── test_client:  HTTPX AsyncClient against a fresh app whose
    │                 get_user_repository dependency returns `repository`
    └── sql_session:  AsyncSession on an in-memory aiosqlite database with
                      the `users` table created
"""

import os
import tempfile

# Override settings for testing BEFORE any studynotes imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="studynotes_test_"), "test.db"
)
os.environ["STORAGE_BACKEND"] = "sql"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from studynotes.database import Base  # noqa: E402
from studynotes.dependencies import get_user_repository  # noqa: E402
from studynotes.main import create_app  # noqa: E402
from studynotes.models.user import UserDocument  # noqa: E402,F401
from studynotes.repositories import InMemoryUserRepository  # noqa: E402
from studynotes.services.locks import UsernameLocks  # noqa: E402
from studynotes.services.study_notes_service import StudyNotesService  # noqa: E402


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def locks():
    return UsernameLocks()


@pytest.fixture
def service(repository, locks):
    return StudyNotesService(repository, locks=locks)


@pytest.fixture
def sample_note_body():
    return {"content": "Derivative of sin(x) is cos(x)", "colour": "yellow"}


@pytest_asyncio.fixture
async def test_client(repository):
    """
    Provides an async HTTP test client for endpoint testing.

    The app's repository dependency is overridden, so no database is touched
    by the /api/v1/users routes.
    """
    app = create_app()
    app.dependency_overrides[get_user_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def sql_session():
    """
    Provides an AsyncSession on a private in-memory SQLite database.

    StaticPool keeps the single connection alive so the schema created here
    is the one the session sees.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()
