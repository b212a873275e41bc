"""
Application exceptions and their FastAPI handlers.

Every error leaves the API as ``{"error": "<message>"}`` with the status code
carried by the exception.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class RunovaError(Exception):
    """Base exception for Runova errors."""

    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class Unauthorized(RunovaError):
    """No authenticated user."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class ValidationError(RunovaError):
    """Missing or invalid input."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message, {"field": field} if field else None)
        self.field = field


class NotFound(RunovaError):
    """No matching record owned by the caller."""

    status_code = 404


class GenerationError(RunovaError):
    """The completion service failed or returned something we can't use."""

    status_code = 500


class StorageError(RunovaError):
    """A database read or write failed."""

    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def runova_error_handler(request: Request, exc: RunovaError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    else:
        logger.info("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body/query validation failures are client errors (400)."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(x) for x in error["loc"] if x != "body")
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    message = "; ".join(parts) or "Invalid request"
    logger.info("%s %s rejected (400): %s", request.method, request.url.path, message)
    return error_response(400, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RunovaError, runova_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    # Catch-all; keep last
    app.add_exception_handler(Exception, unhandled_error_handler)
