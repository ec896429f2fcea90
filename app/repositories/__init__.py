"""
Repositories module initialization
"""

from .product import ProductRepository
from .user import UserAlreadyStored, UserRepository

__all__ = [
    "ProductRepository",
    "UserAlreadyStored",
    "UserRepository",
]
