"""API test fixtures — FastAPI app with settings and outbound client overridden.

Invariants:
    - Every test starts with no dependency overrides and ends with none
    - use_settings() swaps the Settings every route sees
    - use_poem_reply() swaps the outbound client for a FakeAnthropic-backed one

Design Decisions:
    - httpx AsyncClient + ASGITransport: same transport the routes see in production
    - raise_app_exceptions=False: the catch-all handler's 500 is asserted on,
      instead of the re-raised exception
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import get_settings
from app.infrastructure.anthropic_client import get_poem_client
from app.main import app

from tests.mock_anthropic import poem_client_with


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def use_settings(make_settings):
    def _use(**overrides):
        settings = make_settings(**overrides)
        app.dependency_overrides[get_settings] = lambda: settings
        return settings

    _use()
    return _use


@pytest.fixture
def use_poem_reply():
    """Route GET /poem to a fake SDK returning (or raising) the given outcome."""

    def _use(outcome):
        poem_client, fake = poem_client_with(outcome)
        app.dependency_overrides[get_poem_client] = lambda: poem_client
        return fake

    return _use
