"""Integration test fixtures for the HTTP API."""

from __future__ import annotations

from typing import AsyncIterator
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from xns.api.app import create_app
from xns.config import XnsSettings
from xns.core.types import NetworkProfile
from xns.resolution.engine import XnsResolver


# ============================================================================
# Resolver Fixtures
# ============================================================================


@pytest.fixture
def mock_resolver() -> AsyncMock:
    """Resolver double; tests set return values or side effects per call."""
    resolver = AsyncMock(spec=XnsResolver)
    resolver.network = NetworkProfile.MAINNET
    return resolver


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
def test_app(mock_settings: XnsSettings, mock_resolver: AsyncMock) -> FastAPI:
    """
    Create the application with a stubbed resolver.

    ASGITransport does not run the lifespan, so the resolver is placed in
    app state directly.
    """
    app = create_app(mock_settings)
    app.state.resolver = mock_resolver
    return app


@pytest.fixture
async def test_client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Create async HTTP client for testing API."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
