"""
API schemas for Product endpoints following FastAPI best practices
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from app.models.product import ProductBase, PRODUCT_NAME_MAX_LENGTH, PRODUCT_NAME_MIN_LENGTH


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=PRODUCT_NAME_MIN_LENGTH, max_length=PRODUCT_NAME_MAX_LENGTH)
    quantity: Union[int, float] = Field(default=0, ge=0)
    price: float = Field(default=0.0, ge=0)


class ProductUpdate(BaseModel):
    """Schema for updating an existing product"""
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, min_length=PRODUCT_NAME_MIN_LENGTH, max_length=PRODUCT_NAME_MAX_LENGTH)
    quantity: Optional[Union[int, float]] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)


class ProductResponse(ProductBase):
    """Schema for product responses including all fields"""
    id: str

    model_config = ConfigDict(from_attributes=True)
