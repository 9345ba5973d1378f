"""Anthropic Client — wraps AsyncAnthropic for a single, non-retried poem request.

Invariants:
    - Exactly one outbound call per generate(): SDK retries disabled (max_retries=0)
    - Timeout comes from settings, never hardcoded
    - Non-2xx replies → UpstreamAPIError carrying upstream status + body text
    - Timeouts and connection failures → UpstreamAPIError without upstream status
    - get_poem_client raises MissingEnvironmentError before any client is built

Design Decisions:
    - Wrapper over raw client: isolates SDK error types from services
    - No backoff/retry: a failed attempt ends the request
    - Client closed after each request (yield dependency): no pool shared across requests
"""

import logging
from collections.abc import AsyncIterator

import anthropic
from anthropic import (
    APIError,
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
)
from fastapi import Depends

from app.config import Settings, get_settings
from app.core.errors import UpstreamAPIError

logger = logging.getLogger(__name__)


class PoemClient:
    """Wraps the Anthropic client with timeout configuration and error mapping."""

    def __init__(self, api_key: str, timeout_seconds: float = 60.0):
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    async def generate(
        self,
        *,
        model: str,
        max_tokens: int,
        temperature: float | None,
        system: str,
        messages: list,
    ):
        """Create one message and return the raw SDK response."""
        kwargs = {}
        if temperature is not None:
            kwargs["temperature"] = temperature
        try:
            response = await self.client.messages.create(
                model=model,
                max_tokens=max_tokens,
                system=system,
                messages=messages,
                **kwargs,
            )
        except APIStatusError as e:
            raise UpstreamAPIError(
                str(e),
                upstream_status=e.status_code,
                upstream_body=_response_text(e),
            )
        except APITimeoutError:
            raise UpstreamAPIError("API timeout")
        except APIConnectionError as e:
            raise UpstreamAPIError(f"Connection error: {e}")
        except APIError as e:
            raise UpstreamAPIError(str(e))
        self._log_success(response, model)
        return response

    async def close(self) -> None:
        await self.client.close()

    def _log_success(self, response, model: str) -> None:
        """Log successful API call with token usage."""
        usage = getattr(response, "usage", None)
        if usage is None:
            return
        logger.info(
            "Anthropic API success",
            extra={
                "model": model,
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
                "cache_read_input_tokens": getattr(
                    usage, "cache_read_input_tokens", None,
                ),
                "cache_creation_input_tokens": getattr(
                    usage, "cache_creation_input_tokens", None,
                ),
            },
        )


def _response_text(error: APIStatusError) -> str | None:
    response = getattr(error, "response", None)
    if response is None:
        return None
    return response.text


async def get_poem_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[PoemClient]:
    """FastAPI dependency — one client per request, closed afterwards."""
    api_key = settings.require("ANTHROPIC_API_KEY")
    client = PoemClient(api_key, timeout_seconds=settings.anthropic_timeout_seconds)
    try:
        yield client
    finally:
        await client.close()
