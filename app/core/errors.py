"""
Error taxonomy and handlers following FastAPI best practices
"""

import traceback
from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.core.config import config
from app.core.logger import logger

GENERIC_ERROR_MESSAGE = "An unknown error occurred"


class ErrorResponse(Exception):
    """Base exception for application errors rendered as JSON responses"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "ERROR"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: dict = None,
        code: Optional[str] = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details or {}
        super().__init__(message)


class ValidationError(ErrorResponse):
    """Malformed input"""
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"


class ConflictError(ErrorResponse):
    """Duplicate resource"""
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"


class NotFoundError(ErrorResponse):
    """Missing resource"""
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class AuthError(ErrorResponse):
    """Missing, expired or invalid credentials"""
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "AUTH_ERROR"


class ForbiddenError(AuthError):
    """Authenticated identity lacks the required role"""
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"


class StoreError(ErrorResponse):
    """Unclassified backend failure. The caller only sees the generic message."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "STORE_ERROR"

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        super().__init__(message)


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    message: str
    details: Optional[dict] = None


def _render(status_code: int, message: str, details: Optional[dict] = None) -> JSONResponse:
    content = {"message": message}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for ErrorResponse and its subclasses"""
    metadata = {
        "event": "error_response",
        "code": exc.code,
        "status_code": exc.status_code,
        "url": str(request.url),
        "method": request.method,
    }

    if exc.status_code >= 500:
        if config.environment == "development":
            metadata["traceback"] = traceback.format_exc()
        logger.error(f"Error: {exc.message}", metadata=metadata)
    else:
        logger.warning(f"Request rejected: {exc.message}", metadata=metadata)

    return _render(exc.status_code, exc.message, exc.details)


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handler for FastAPI HTTPException"""
    logger.warning(
        f"HTTPException: {exc.detail}",
        metadata={
            "event": "http_exception",
            "status_code": exc.status_code,
            "url": str(request.url),
            "method": request.method,
        }
    )
    return _render(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Handler for request parameters FastAPI could not parse"""
    logger.warning(
        "Request validation failed",
        metadata={"event": "request_validation_error", "url": str(request.url)}
    )
    return _render(
        status.HTTP_400_BAD_REQUEST,
        "Invalid request",
        {"errors": [error.get("msg") for error in exc.errors()]},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last-resort handler: log everything, leak nothing"""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        error=exc,
        metadata={"event": "unhandled_exception", "traceback": traceback.format_exc()}
    )
    return _render(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)
