"""
Utilities module initialization
"""

from .validators import (
    coerce_number,
    normalize_credential,
    validate_email,
    validate_password,
    validate_positive_number,
    validate_product_name,
)

__all__ = [
    "coerce_number",
    "normalize_credential",
    "validate_email",
    "validate_password",
    "validate_positive_number",
    "validate_product_name",
]
