"""Boundary Validation — pure schema checks returning tagged results.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Never raise on bad input: return Invalid with one violation per failing field
    - Valid values are exactly what the schema produced (defaults applied, nothing trimmed)

Design Decisions:
    - Tagged Valid/Invalid over raising ValidationError: routes and services decide
      which ServiceError a failure becomes, so pydantic errors never cross layers
    - Field paths use the wire names (aliases) the client actually sent
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.errors import FieldViolation
from app.schemas.friend import FriendRequest
from app.schemas.model_response import ModelResponse

T = TypeVar("T", bound=BaseModel)

# Reported for violations that apply to the whole payload
BODY_FIELD = "body"


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    violations: list[FieldViolation]


Validated = Valid | Invalid


def violations_from(exc: ValidationError) -> list[FieldViolation]:
    """Flatten a pydantic ValidationError into field violations."""
    return [
        FieldViolation(
            field=".".join(str(loc) for loc in e["loc"]) or BODY_FIELD,
            message=e["msg"],
            type=e["type"],
        )
        for e in exc.errors()
    ]


def describe(violations: list[FieldViolation]) -> str:
    """One-line summary, e.g. 'content.0.text: Field required'."""
    return "; ".join(f"{v.field}: {v.message}" for v in violations)


def _validate(schema: type[T], raw: Any) -> Validated:
    try:
        return Valid(schema.model_validate(raw))
    except ValidationError as e:
        return Invalid(violations_from(e))


def validate_friend_request(raw: Any) -> Validated:
    """Validate a parsed JSON value as a FriendRequest."""
    return _validate(FriendRequest, raw)


def validate_model_response(raw: Any) -> Validated:
    """Validate a Messages API reply (plain dict or SDK model) as a ModelResponse."""
    if hasattr(raw, "model_dump"):
        raw = raw.model_dump()
    return _validate(ModelResponse, raw)
