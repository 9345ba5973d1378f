"""Greeting Routes — hello world and the configured name.

Invariants:
    - GET / and GET /me are pure reads of configuration: same env, same bytes
    - FIRST_NAME / LAST_NAME are resolved before the body is looked at
    - POST /me body is validated by core/validation.py, not by FastAPI, so the
      empty-body default and the malformed-JSON case share one error shape
"""

import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.config import Settings, get_settings
from app.core.errors import FieldViolation, InvalidRequestError
from app.core.greeting import friend_greeting, full_name
from app.core.validation import BODY_FIELD, Invalid, validate_friend_request

router = APIRouter(tags=["greeting"])


@router.get("/")
async def hello():
    return {"Hello": "World"}


@router.get("/me")
async def me(settings: Settings = Depends(get_settings)):
    """Full name from FIRST_NAME and LAST_NAME."""
    first_name = settings.require("FIRST_NAME")
    last_name = settings.require("LAST_NAME")
    return {"name": full_name(first_name, last_name)}


@router.post("/me", response_class=PlainTextResponse)
async def greet_friend(
    request: Request, settings: Settings = Depends(get_settings),
):
    """Greet the friend named in the body (default "Friend") as plain text."""
    first_name = settings.require("FIRST_NAME")
    last_name = settings.require("LAST_NAME")
    result = validate_friend_request(await _read_json(request))
    if isinstance(result, Invalid):
        raise InvalidRequestError(result.violations)
    return friend_greeting(first_name, last_name, result.value.friend_name)


async def _read_json(request: Request):
    """Parse the request body; an empty body is an empty object."""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as e:
        raise InvalidRequestError([
            FieldViolation(BODY_FIELD, f"Invalid JSON: {e}", "json_invalid"),
        ])
