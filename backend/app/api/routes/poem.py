"""Poem Route — GET /poem relays one generated poem.

Invariants:
    - Missing ANTHROPIC_API_KEY fails in get_poem_client, before any outbound call
    - Every failure surfaces as a ServiceError handled in api/error_handlers.py
"""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.infrastructure.anthropic_client import PoemClient, get_poem_client
from app.services.poem_service import write_poem

router = APIRouter(tags=["poem"])


@router.get("/poem")
async def poem(
    client: PoemClient = Depends(get_poem_client),
    settings: Settings = Depends(get_settings),
):
    return {"poem": await write_poem(client, settings)}
