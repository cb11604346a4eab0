"""
Exception handlers translating redirect service errors into HTTP responses.

Routes let service exceptions propagate; these handlers are registered on
the app and give every route the same mapping.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from redirect_app.schemas.redirect import ValidationErrorResponse
from redirect_app.services.exceptions import (
    Conflict,
    NotFound,
    RedirectError,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error"


async def validation_failed_handler(request: Request, exc: ValidationFailed):
    body = ValidationErrorResponse(on_item=exc.field, errors=exc.messages)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(),
    )


async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Redirect not found"},
    )


async def redirect_error_handler(request: Request, exc: RedirectError):
    """Conflict and StorageFailure: opaque server error, details stay in logs"""
    if isinstance(exc, Conflict):
        logger.warning("Rejected duplicate alias '%s'", exc.alias)
    else:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers; the most specific exception class wins"""
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(NotFound, not_found_handler)
    app.add_exception_handler(RedirectError, redirect_error_handler)
