"""
Product model as stored in the products collection
"""

from datetime import datetime, timezone
from typing import Union

from pydantic import BaseModel, Field

PRODUCT_NAME_MIN_LENGTH = 3
PRODUCT_NAME_MAX_LENGTH = 100


def utc_now():
    """Helper function for Pydantic default_factory to get current UTC time"""
    return datetime.now(timezone.utc)


class ProductBase(BaseModel):
    """Base Product model with all common fields"""

    name: str = Field(..., min_length=PRODUCT_NAME_MIN_LENGTH, max_length=PRODUCT_NAME_MAX_LENGTH)
    quantity: Union[int, float] = Field(default=0, ge=0)
    price: float = Field(default=0.0, ge=0)

    # Audit trail
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
