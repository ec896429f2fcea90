"""
Product API endpoints following FastAPI best practices
Each route declares its guard chain; handlers perform one store operation.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from app.core.errors import ErrorResponseModel
from app.dependencies.auth import authenticate, authorize
from app.dependencies.pipeline import RequestContext, guarded
from app.dependencies.product import (
    require_existing_product,
    require_unique_product_name,
    validate_new_product,
    validate_product_changes,
)
from app.dependencies.services import get_product_service
from app.models.user import Role
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.product import ProductService

router = APIRouter()


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        409: {"model": ErrorResponseModel},
    },
)
async def create_product(
    ctx: RequestContext = Depends(guarded(authenticate, validate_new_product, require_unique_product_name)),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a new product. Requires authentication.
    """
    return await service.create_product(ProductCreate(**ctx.product_fields), ctx.identity)


@router.get(
    "",
    response_model=List[ProductResponse],
    responses={401: {"model": ErrorResponseModel}},
)
async def list_products(
    ctx: RequestContext = Depends(guarded(authenticate)),
    service: ProductService = Depends(get_product_service),
):
    """
    List every product. Returns an empty list when there are none.
    """
    return await service.list_products()


@router.get(
    "/{name}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
    },
)
async def get_product(
    name: str,
    ctx: RequestContext = Depends(guarded(authenticate, require_existing_product)),
    service: ProductService = Depends(get_product_service),
):
    """
    Get a product by its name.
    """
    return await service.get_product(name)


@router.put(
    "/{name}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        403: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
        409: {"model": ErrorResponseModel},
    },
)
async def update_product(
    name: str,
    ctx: RequestContext = Depends(guarded(
        authenticate,
        authorize(Role.ADMIN),
        validate_product_changes,
        require_existing_product,
    )),
    service: ProductService = Depends(get_product_service),
):
    """
    Update a product by name. Requires the admin role.
    """
    return await service.update_product(name, ProductUpdate(**ctx.product_fields), ctx.identity)


@router.delete(
    "/{name}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponseModel},
        401: {"model": ErrorResponseModel},
        403: {"model": ErrorResponseModel},
        404: {"model": ErrorResponseModel},
    },
)
async def delete_product(
    name: str,
    ctx: RequestContext = Depends(guarded(authenticate, authorize(Role.ADMIN), require_existing_product)),
    service: ProductService = Depends(get_product_service),
):
    """
    Delete a product by name and return it. Requires the admin role.
    """
    return await service.delete_product(name, ctx.identity)
