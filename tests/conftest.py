"""Shared test fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.jp_common.database import get_db_session
from src.main import app


async def _fake_db_session() -> AsyncGenerator[MagicMock, None]:
    yield MagicMock()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client for the FastAPI app; routers get a mock session."""
    app.dependency_overrides[get_db_session] = _fake_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_db_session, None)
