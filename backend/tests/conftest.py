"""Root conftest — shared test configuration.

Invariants:
    - Tests never use a real API key or a developer's .env file
    - make_settings builds Settings from explicit values only
"""

import os

import pytest

from app.config import Settings

# Ensure tests don't accidentally use real credentials
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")


@pytest.fixture
def make_settings():
    """Factory: Settings with every required key set unless overridden."""

    def _make(**overrides) -> Settings:
        values = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "anthropic_api_key": "sk-ant-test-fake-key",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make
