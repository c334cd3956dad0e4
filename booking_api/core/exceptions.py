"""
Application error taxonomy and the handlers that render it.
Every error leaves the API as {"error": {"code", "message", "details", "path"}}.
"""

from typing import Any, Dict, List, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from booking_api.config import get_settings

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed or out-of-range input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if field:
            details.setdefault("fields", [{"field": field, "message": message or self.default_message}])
        super().__init__(message, details)
        self.field = field


class NotFoundError(AppError):
    """Referenced entity is absent or soft-deleted."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"

    def __init__(self, resource: str = "Resource", resource_id: Any = None):
        message = f"{resource} not found"
        details = {"resource": resource}
        if resource_id is not None:
            details["id"] = resource_id
        super().__init__(message, details)


class ConflictError(AppError):
    """Request clashes with current state: overlaps, duplicates, illegal transitions."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict with the current state of the resource"


class DuplicatePaymentError(ConflictError):
    default_message = "Payment already exists for this reservation"


class AuthenticationError(AppError):
    """Missing or invalid credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class AuthorizationError(AppError):
    """Caller lacks the role or ownership the action requires."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You are not allowed to perform this action"


class PersistenceError(AppError):
    """Store unavailable or query failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "A database error occurred"


def _error_body(request: Request, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> dict:
    return {"error": {"code": code, "message": message, "details": details or {}, "path": request.url.path}}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    details = exc.details
    if isinstance(exc, PersistenceError) and get_settings().is_production:
        details = {}
    if exc.status_code >= 500:
        logger.error("Request failed", path=request.url.path, code=type(exc).__name__, error=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, type(exc).__name__, exc.message, details),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reshape FastAPI's 422 into the same 400 ValidationError body."""
    fields: List[Dict[str, str]] = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(request, "ValidationError", "Validation failed", {"fields": fields}),
    )


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Database error", path=request.url.path)
    details = {} if get_settings().is_production else {"reason": str(exc.__class__.__name__)}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, "PersistenceError", PersistenceError.default_message, details),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""
    logger.exception("Unexpected error occurred", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, "InternalServerError", "An unexpected error occurred. Please try again later."),
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
