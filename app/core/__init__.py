"""
Core module initialization
"""

from .config import config
from .errors import (
    ErrorResponse,
    ErrorResponseModel,
    ValidationError,
    ConflictError,
    NotFoundError,
    AuthError,
    ForbiddenError,
    StoreError,
)
from .logger import logger

__all__ = [
    "config",
    "ErrorResponse",
    "ErrorResponseModel",
    "ValidationError",
    "ConflictError",
    "NotFoundError",
    "AuthError",
    "ForbiddenError",
    "StoreError",
    "logger",
]
