"""Error Hierarchy — typed, categorized exceptions for every failure the service reports.

Invariants:
    - Every error has a code (str), a kind (FaultKind) and an http_status
    - http_status is derived from the kind by status_for(), never passed ad hoc
    - to_response() always carries a "message" field
    - Upstream diagnostics (status, body) stay on the exception for server-side
      logs and are never part of the client-facing body

Design Decisions:
    - Single hierarchy with ServiceError base: one FastAPI handler catches all
    - status_for() is the one exhaustive mapping from fault kind to status
"""

from dataclasses import dataclass
from enum import Enum


class FaultKind(str, Enum):
    """What went wrong, independent of which route noticed it."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    INTERNAL = "internal"


def status_for(kind: FaultKind) -> int:
    """Map a fault kind to the HTTP status the client receives."""
    match kind:
        case FaultKind.VALIDATION:
            return 400
        case FaultKind.CONFIGURATION | FaultKind.UPSTREAM | FaultKind.INTERNAL:
            return 500
    raise ValueError(f"Unknown fault kind: {kind!r}")


@dataclass(frozen=True)
class FieldViolation:
    """One field-level schema violation."""
    field: str
    message: str
    type: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


class ServiceError(Exception):
    """Base exception for all service errors."""

    def __init__(self, message: str, code: str, kind: FaultKind):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.http_status = status_for(kind)

    def to_response(self) -> dict:
        """Convert to the JSON error body."""
        return {"message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidRequestError(ServiceError):
    """Inbound payload failed schema constraints."""
    def __init__(self, violations: list[FieldViolation]):
        super().__init__(
            "Invalid request", "VALIDATION_ERROR", FaultKind.VALIDATION,
        )
        self.violations = violations

    def to_response(self) -> dict:
        return {
            "message": self.message,
            "details": [v.to_dict() for v in self.violations],
        }


# ─── Server Errors (500-level) ──────────────────────────────────

class MissingEnvironmentError(ServiceError):
    """Required environment variable is absent."""
    def __init__(self, name: str):
        super().__init__(
            f"Missing required environment variable: {name}",
            "MISSING_ENVIRONMENT", FaultKind.CONFIGURATION,
        )
        self.name = name


class UpstreamAPIError(ServiceError):
    """Outbound model call failed."""
    def __init__(
        self,
        detail: str,
        upstream_status: int | None = None,
        upstream_body: str | None = None,
    ):
        super().__init__(
            "Upstream model request failed", "UPSTREAM_ERROR", FaultKind.UPSTREAM,
        )
        self.detail = detail
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body


class UnexpectedResponseError(ServiceError):
    """Outbound model call succeeded but the body has an unexpected shape."""
    def __init__(self, detail: str):
        super().__init__(
            detail, "UNEXPECTED_RESPONSE", FaultKind.UPSTREAM,
        )
