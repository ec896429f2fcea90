"""
Schemas module initialization
"""

from .auth import Credentials, TokenResponse
from .product import ProductCreate, ProductUpdate, ProductResponse

__all__ = [
    "Credentials",
    "TokenResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
