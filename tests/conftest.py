"""Shared test fixtures for the Pixel Gallery API.

Every test gets its own SQLite file under tmp_path, so the schema is
created fresh and nothing leaks between tests.
"""

from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any, Dict

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from pixelgallery.core.config import Settings
from pixelgallery.db.session import Database
from pixelgallery.main import create_app


BASE_URL = "http://testserver"


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Provide test settings pointing at a throwaway SQLite file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'gallery.sqlite'}",
        api_base_url=BASE_URL,
        auth_scheme="Bearer",
        auth_sub_prefix="sub:",
        default_page_limit=5,
        enable_debug_routes=True,
    )


# =============================================================================
# DATABASE
# =============================================================================


@pytest_asyncio.fixture
async def database(test_settings: Settings) -> AsyncGenerator[Database, None]:
    """Storage handle with all tables created."""
    database = Database(test_settings.database_url)
    await database.create_all()
    yield database
    await database.dispose()


@pytest_asyncio.fixture
async def db(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Async session for service-level tests."""
    async with database.session_factory() as session:
        yield session


# =============================================================================
# HTTP
# =============================================================================


@pytest.fixture
def client(test_settings: Settings) -> Generator[TestClient, None, None]:
    """TestClient with the lifespan running (tables created on enter)."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth() -> Callable[[str], Dict[str, str]]:
    """Build the Authorization header for a caller subject."""

    def _auth(sub: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer sub:{sub}"}

    return _auth


@pytest.fixture
def register(client: TestClient, auth) -> Callable[..., Dict[str, Any]]:
    """Register a user through POST /users and return its projection."""

    def _register(sub: str, name: str = None) -> Dict[str, Any]:
        response = client.post(
            "/users",
            json={"userinfo": {"sub": sub, "name": name or sub, "email": f"{sub}@example.com"}},
            headers=auth(sub),
        )
        assert response.status_code in (200, 201), response.text
        return response.json()

    return _register
