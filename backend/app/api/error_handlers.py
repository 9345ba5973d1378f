"""Error Handlers — the single boundary where failures become HTTP responses.

Invariants:
    - ServiceError → exc.http_status + exc.to_response() ({"message": ...})
    - RequestValidationError → 400 with field-level details, same shape as InvalidRequestError
    - Exception (catch-all) → 500 generic message, never leaks internal details
    - Upstream status/body are logged here, never returned to the client

Design Decisions:
    - Three-layer handler: domain (ServiceError), validation (FastAPI), catch-all (Exception)
    - Kept out of main.py so the app module only wires things together
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from app.core.errors import (
    FaultKind,
    FieldViolation,
    InvalidRequestError,
    ServiceError,
    UpstreamAPIError,
    status_for,
)

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """Handle all typed service errors."""
        _log_service_error(request, exc)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle FastAPI-level validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        error = InvalidRequestError([
            FieldViolation(
                field=".".join(str(loc) for loc in e["loc"]),
                message=e["msg"],
                type=e["type"],
            )
            for e in exc.errors()
        ])
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status_for(FaultKind.INTERNAL),
            content={"message": GENERIC_ERROR_MESSAGE},
        )


def _log_service_error(request: Request, exc: ServiceError) -> None:
    extra = {"error_code": exc.code, "path": request.url.path}
    if isinstance(exc, UpstreamAPIError):
        extra["upstream_status"] = exc.upstream_status
        logger.error(
            f"Upstream failure: {exc.detail} body={exc.upstream_body!r}",
            extra=extra,
        )
    elif exc.kind is FaultKind.VALIDATION:
        logger.warning(f"ServiceError: {exc.message}", extra=extra)
    else:
        logger.error(f"ServiceError: {exc.message}", extra=extra)
