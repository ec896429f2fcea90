"""
Services module initialization
"""

from .auth import AuthService, InvalidCredentials, UserExists
from .credentials import (
    CredentialFormatError,
    CredentialService,
    CredentialSettings,
    TokenExpired,
    TokenInvalid,
)
from .product import ProductService

__all__ = [
    "AuthService",
    "InvalidCredentials",
    "UserExists",
    "CredentialFormatError",
    "CredentialService",
    "CredentialSettings",
    "TokenExpired",
    "TokenInvalid",
    "ProductService",
]
