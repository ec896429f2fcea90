"""
API module initialization
"""

from . import auth, health, products

__all__ = ["auth", "health", "products"]
