"""
Models module initialization
"""

from .product import ProductBase
from .user import Identity, Role, User

__all__ = [
    "ProductBase",
    "Identity",
    "Role",
    "User",
]
