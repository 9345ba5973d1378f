"""Anthropic Client — single-call behavior and SDK error mapping.

Tests cover:
    - generate() forwards model/max_tokens/temperature/system/messages once
    - temperature None is omitted from the request
    - SDK status errors → UpstreamAPIError with upstream status + body
    - timeouts / connection failures → UpstreamAPIError without status
    - the real client is built with retries disabled and the configured timeout
    - get_poem_client fails on a missing key before building a client
"""

import pytest

from app.core.errors import MissingEnvironmentError, UpstreamAPIError
from app.infrastructure.anthropic_client import PoemClient, get_poem_client

from tests.mock_anthropic import (
    connection_error,
    message_response,
    poem_client_with,
    status_error,
    timeout_error,
)


async def _generate(client, **overrides):
    kwargs = {
        "model": "claude-3-5-haiku-latest",
        "max_tokens": 150,
        "temperature": 0.7,
        "system": "Respond only with short poems.",
        "messages": [{"role": "user", "content": "haiku please"}],
    }
    kwargs.update(overrides)
    return await client.generate(**kwargs)


async def test_generate_makes_exactly_one_call():
    reply = message_response("Cherry blossoms fall")
    client, fake = poem_client_with(reply)
    assert await _generate(client) is reply
    assert len(fake.messages.calls) == 1
    call = fake.messages.calls[0]
    assert call["model"] == "claude-3-5-haiku-latest"
    assert call["max_tokens"] == 150
    assert call["temperature"] == 0.7
    assert call["system"] == "Respond only with short poems."


async def test_generate_omits_temperature_when_none():
    client, fake = poem_client_with(message_response("x"))
    await _generate(client, temperature=None)
    assert "temperature" not in fake.messages.calls[0]


async def test_status_error_maps_to_upstream_error():
    client, fake = poem_client_with(status_error(529, {"type": "error", "error": {"type": "overloaded_error"}}))
    with pytest.raises(UpstreamAPIError) as exc_info:
        await _generate(client)
    exc = exc_info.value
    assert exc.upstream_status == 529
    assert "overloaded_error" in exc.upstream_body
    assert exc.http_status == 500
    assert len(fake.messages.calls) == 1


async def test_timeout_maps_to_upstream_error():
    client, _ = poem_client_with(timeout_error())
    with pytest.raises(UpstreamAPIError) as exc_info:
        await _generate(client)
    assert exc_info.value.upstream_status is None
    assert exc_info.value.detail == "API timeout"


async def test_connection_error_maps_to_upstream_error():
    client, fake = poem_client_with(connection_error())
    with pytest.raises(UpstreamAPIError) as exc_info:
        await _generate(client)
    assert exc_info.value.upstream_status is None
    assert len(fake.messages.calls) == 1


async def test_real_client_disables_retries_and_uses_timeout():
    client = PoemClient("sk-ant-test-fake-key", timeout_seconds=12.5)
    try:
        assert client.client.max_retries == 0
        assert client.client.timeout == 12.5
    finally:
        await client.close()


async def test_get_poem_client_requires_api_key(make_settings, monkeypatch):
    built = []
    monkeypatch.setattr(
        "app.infrastructure.anthropic_client.PoemClient",
        lambda *a, **kw: built.append((a, kw)),
    )
    deps = get_poem_client(make_settings(anthropic_api_key=""))
    with pytest.raises(MissingEnvironmentError) as exc_info:
        await deps.__anext__()
    assert exc_info.value.name == "ANTHROPIC_API_KEY"
    assert built == []


async def test_get_poem_client_closes_client(make_settings):
    deps = get_poem_client(make_settings(anthropic_timeout_seconds=5))
    client = await deps.__anext__()
    assert isinstance(client, PoemClient)
    await deps.aclose()
    assert client.client.is_closed()
