"""Shared fixtures for API tests."""
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from api.main import app
from core.config import Settings, get_settings
from db.session import get_async_session

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def make_auth_settings(**overrides: object) -> Settings:
    """Settings with DEV_MODE off so bearer tokens are enforced."""
    values = {
        "_env_file": None,
        "database_url": "postgresql://test",
        "dev_mode": False,
        "jwt_secret_key": TEST_JWT_SECRET,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
async def auth_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient]:
    """
    Create an unauthenticated AsyncClient with DEV_MODE disabled.

    Requests must carry a bearer token obtained from /auth/signup or /auth/signin.
    """
    get_settings.cache_clear()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession]:
        yield db_session

    def override_get_settings() -> Settings:
        return make_auth_settings()

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_settings] = override_get_settings

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


async def signup_and_get_headers(
    client: AsyncClient,
    email: str,
    password: str = "correct-horse",
) -> dict[str, str]:
    """Sign up a new account and return an Authorization header for it."""
    response = await client.post(
        "/auth/signup", json={"email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
