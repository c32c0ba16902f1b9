"""
Error Handling

Typed application errors and the FastAPI exception handlers that translate
every failure into the uniform response envelope:

    {"message": str, "statusCode": int, "code": str, "details": any | null}

Gates, services and routers raise ``AppError`` subclasses; nothing below the
handlers builds HTTP responses for errors.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from schoolbase.core.config import settings

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR_MESSAGE = "An internal server error occurred."


class AppError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        code: str = "SERVER_ERROR",
        details: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details = details
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, status_code={self.status_code})"


# ============================================
# Authentication / Authorization
# ============================================


class AuthRequiredError(AppError):
    """Raised when no bearer credential accompanies the request."""

    def __init__(self):
        super().__init__(
            message="Authentication token required.",
            status_code=status.HTTP_401_UNAUTHORIZED,
            code="AUTH_REQUIRED",
        )


class AuthInvalidError(AppError):
    """Raised when the credential is rejected or has no profile behind it."""

    def __init__(self, message: str = "Invalid or expired token."):
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            code="AUTH_INVALID",
        )


class RoleMissingError(AppError):
    def __init__(self):
        super().__init__(
            message="User role not found.",
            status_code=status.HTTP_401_UNAUTHORIZED,
            code="ROLE_MISSING",
        )


class RoleForbiddenError(AppError):
    def __init__(self, role: str):
        super().__init__(
            message=f"Forbidden: Insufficient permissions. Role '{role}' not allowed.",
            status_code=status.HTTP_403_FORBIDDEN,
            code="ROLE_FORBIDDEN",
        )


class TenantRequiredError(AppError):
    def __init__(self):
        super().__init__(
            message="Forbidden: User is not associated with a school.",
            status_code=status.HTTP_403_FORBIDDEN,
            code="TENANT_REQUIRED",
        )


class TenantMismatchError(AppError):
    def __init__(self):
        super().__init__(
            message="Forbidden: Access to this school's data is not allowed.",
            status_code=status.HTTP_403_FORBIDDEN,
            code="TENANT_MISMATCH",
        )


# ============================================
# Input / Domain
# ============================================


class InvalidInputError(AppError):
    def __init__(self, message: str, details: Any = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            code="INVALID_INPUT",
            details=details,
        )


class NotFoundError(AppError):
    """Raised when an entity does not exist (or is outside the caller's tenant)."""

    def __init__(self, entity: str, message: str | None = None):
        super().__init__(
            message=message or f"{entity.capitalize()} not found.",
            status_code=status.HTTP_404_NOT_FOUND,
            code=f"{entity.upper()}_NOT_FOUND",
        )


class StoreError(AppError):
    """
    Raised when the relational store fails for any reason other than "no rows".

    The driver message is kept as opaque ``details``.
    """

    def __init__(self, message: str, code: str, details: Any = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=code,
            details=details,
        )


@contextmanager
def store_errors(message: str, code: str) -> Iterator[None]:
    """
    Translate relational-store failures into ``StoreError``.

    Usage:
        with store_errors("Failed to create school.", "SCHOOL_CREATION_ERROR"):
            school = await SchoolRepository.create(db, data)
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.exception(f"{code}: {e}")
        detail = getattr(e, "orig", None) or e
        raise StoreError(message, code, details=str(detail)) from e


class StorageError(AppError):
    """Raised when the object store rejects a request."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code="STORAGE_UPLOAD_ERROR",
            details=details,
        )


# ============================================
# Response envelope
# ============================================


def error_envelope(
    message: str,
    status_code: int,
    code: str,
    details: Any = None,
) -> dict[str, Any]:
    """Build the uniform error body, masking 500-class internals in production."""
    if settings.is_production and status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        message = GENERIC_SERVER_ERROR_MESSAGE
        details = None

    return {
        "message": message,
        "statusCode": status_code,
        "code": code,
        "details": details,
    }


def _respond(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None):
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Flatten Pydantic error dicts into ``{path, message}`` pairs.

    The leading request location (``body``, ``query``, ``path``) is dropped
    so paths read like payload field names, e.g. ``allergies.0``.
    """
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        formatted.append(
            {
                "path": ".".join(str(part) for part in loc),
                "message": error.get("msg", "Invalid value"),
            }
        )
    return formatted


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{exc.code}: {exc.message} ({exc.details})")
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return _respond(
        exc.status_code,
        error_envelope(exc.message, exc.status_code, exc.code, exc.details),
        headers,
    )


async def validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return _respond(
        status.HTTP_400_BAD_REQUEST,
        error_envelope(
            "Validation failed",
            status.HTTP_400_BAD_REQUEST,
            "VALIDATION_FAILED",
            format_validation_errors(exc.errors()),
        ),
    )


async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed."
    return _respond(
        exc.status_code,
        error_envelope(message, exc.status_code, f"HTTP_{exc.status_code}"),
        getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error: {exc}")
    return _respond(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_envelope(
            str(exc) or "An unexpected error occurred.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "SERVER_ERROR",
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach every error translator to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "AppError",
    "AuthInvalidError",
    "AuthRequiredError",
    "InvalidInputError",
    "NotFoundError",
    "RoleForbiddenError",
    "RoleMissingError",
    "StorageError",
    "StoreError",
    "TenantMismatchError",
    "TenantRequiredError",
    "error_envelope",
    "format_validation_errors",
    "register_exception_handlers",
    "store_errors",
]
