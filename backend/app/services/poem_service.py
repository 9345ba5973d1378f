"""Poem Service — one outbound model call turned into one poem string.

Invariants:
    - Order: outbound call → response shape validation → extraction
    - Exactly one call to client.generate() per write_poem()
    - Shape violations → UnexpectedResponseError (never an empty poem labelled success)
    - Empty content → "" (a valid, if short, poem)
"""

import logging

from app.config import Settings
from app.core.errors import UnexpectedResponseError
from app.core.poem import (
    POEM_SYSTEM_PROMPT,
    build_poem_messages,
    extract_poem,
    fragment_texts,
)
from app.core.validation import Invalid, describe, validate_model_response
from app.infrastructure.anthropic_client import PoemClient

logger = logging.getLogger(__name__)


async def write_poem(client: PoemClient, settings: Settings) -> str:
    raw = await client.generate(
        model=settings.poem_model,
        max_tokens=settings.poem_max_tokens,
        temperature=settings.poem_temperature,
        system=POEM_SYSTEM_PROMPT,
        messages=build_poem_messages(),
    )
    result = validate_model_response(raw)
    if isinstance(result, Invalid):
        raise UnexpectedResponseError(describe(result.violations))
    logger.info(", ".join(fragment_texts(result.value)))
    return extract_poem(result.value)
