# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read once at import; this must happen before blog_api is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["REQUIRE_AUTH"] = "true"
os.environ.pop("IMGBB_API_KEY", None)

from collections.abc import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from blog_api.auth import IdentityGate  # noqa: E402
from blog_api.clients import ImageHostClient  # noqa: E402
from blog_api.configs import settings  # noqa: E402
from blog_api.db import SessionMaker, close_db, create_engine, create_session_maker, init_db  # noqa: E402
from blog_api.main import app  # noqa: E402
from blog_api.models import Role, UserDB  # noqa: E402
from helpers import ADMIN_EMAIL, AUTHOR_EMAIL, FakeTokenVerifier  # noqa: E402


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine shared by every connection of one test."""
    db_engine = create_engine(settings, poolclass=StaticPool)
    await init_db(db_engine)
    yield db_engine
    await close_db(db_engine)


@pytest.fixture
def session_maker(engine: AsyncEngine) -> SessionMaker:
    return create_session_maker(engine)


@pytest.fixture
async def session(session_maker: SessionMaker) -> AsyncGenerator[AsyncSession]:
    async with session_maker() as db_session:
        yield db_session


@pytest.fixture
def token_verifier() -> FakeTokenVerifier:
    return FakeTokenVerifier()


@pytest.fixture
def mock_image_host() -> MagicMock:
    """Create a mock image host client for testing."""
    mock = MagicMock(spec=ImageHostClient)
    mock.upload = AsyncMock(return_value="https://i.ibb.co/abc/photo.png")
    mock.close = AsyncMock()
    return mock


@pytest.fixture
async def client(
    engine: AsyncEngine,
    session_maker: SessionMaker,
    token_verifier: FakeTokenVerifier,
    mock_image_host: MagicMock,
) -> AsyncGenerator[AsyncClient]:
    """HTTP client wired to the test database and a fake identity provider."""
    app.state.engine = engine
    app.state.session_maker = session_maker
    app.state.identity_gate = IdentityGate(token_verifier, require_auth=True)
    app.state.image_host = mock_image_host

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def admin_user(session_maker: SessionMaker) -> UserDB:
    """Store the admin identity's user record with the admin role."""
    async with session_maker() as db_session:
        user = UserDB(uid="a1", email=ADMIN_EMAIL, display_name="Admin", role=Role.ADMIN.value)
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user


@pytest.fixture
async def regular_user(session_maker: SessionMaker) -> UserDB:
    """Store the author identity's user record with the default role."""
    async with session_maker() as db_session:
        user = UserDB(uid="u1", email=AUTHOR_EMAIL, display_name="Author")
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user
