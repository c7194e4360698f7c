"""
Security test fixtures.

These fixtures enable testing IDOR (Insecure Direct Object Reference)
scenarios by creating two users with their own bookmarks and clients that
are authenticated as each of them via a get_current_user override.
"""
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from models.user import User


async def _make_user(db_session: AsyncSession, email: str) -> User:
    user = User(email=email)
    db_session.add(user)
    await db_session.flush()
    await db_session.refresh(user)
    return user


async def _make_bookmark(db_session: AsyncSession, user: User, label: str) -> Bookmark:
    bookmark = Bookmark(
        user_id=user.id,
        title=f"{label}'s Private Bookmark",
        link=f"https://{label.lower().replace(' ', '-')}.example.com/",
        description=f"This should only be accessible to {label}",
    )
    db_session.add(bookmark)
    await db_session.flush()
    await db_session.refresh(bookmark)
    return bookmark


@pytest.fixture
async def user_a(db_session: AsyncSession) -> User:
    """Create the first test user (User A)."""
    return await _make_user(db_session, "user-a@test.com")


@pytest.fixture
async def user_b(db_session: AsyncSession) -> User:
    """Create a second test user (User B) for IDOR testing."""
    return await _make_user(db_session, "user-b@test.com")


@pytest.fixture
async def user_a_bookmark(db_session: AsyncSession, user_a: User) -> Bookmark:
    """Create a bookmark belonging to User A."""
    return await _make_bookmark(db_session, user_a, "User A")


@pytest.fixture
async def user_b_bookmark(db_session: AsyncSession, user_b: User) -> Bookmark:
    """Create a bookmark belonging to User B."""
    return await _make_bookmark(db_session, user_b, "User B")


@pytest.fixture
async def client_as_user_b(
    db_session: AsyncSession,
    user_b: User,
) -> AsyncGenerator[AsyncClient]:
    """Create a test client authenticated as User B."""
    from core.config import get_settings

    get_settings.cache_clear()

    from api.main import app
    from core.auth import get_current_user
    from db.session import get_async_session

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    async def override_get_current_user() -> User:
        return user_b

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_current_user] = override_get_current_user

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()
