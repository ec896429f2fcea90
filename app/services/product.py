"""
Product service: one store operation per request handler
"""

from typing import List

from app.core.errors import NotFoundError
from app.core.logger import logger
from app.models.user import Identity
from app.repositories.product import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse


def product_not_found() -> NotFoundError:
    return NotFoundError("Product not found")


class ProductService:
    """Service layer for product operations"""

    def __init__(self, repository: ProductRepository):
        self.repository = repository

    async def create_product(self, product_data: ProductCreate, identity: Identity) -> ProductResponse:
        product = await self.repository.create(product_data)
        logger.info(
            f"Created product {product.name}",
            user_id=identity.subject_id,
            metadata={"event": "create_product", "product_id": product.id}
        )
        return product

    async def list_products(self) -> List[ProductResponse]:
        products = await self.repository.list_all()
        logger.debug(f"Fetched {len(products)} products", metadata={"event": "list_products"})
        return products

    async def get_product(self, name: str) -> ProductResponse:
        product = await self.repository.get_by_name(name)
        if product is None:
            raise product_not_found()
        return product

    async def update_product(self, name: str, product_data: ProductUpdate, identity: Identity) -> ProductResponse:
        # The product can vanish between the existence guard and this call
        product = await self.repository.update_by_name(name, product_data)
        if product is None:
            raise product_not_found()
        logger.info(
            f"Updated product {name}",
            user_id=identity.subject_id,
            metadata={"event": "update_product", "product_id": product.id}
        )
        return product

    async def delete_product(self, name: str, identity: Identity) -> ProductResponse:
        product = await self.repository.delete_by_name(name)
        if product is None:
            raise product_not_found()
        logger.info(
            f"Deleted product {name}",
            user_id=identity.subject_id,
            metadata={"event": "delete_product", "product_id": product.id}
        )
        return product
