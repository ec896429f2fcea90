"""
Product repository for data access layer following Repository pattern
"""

from datetime import datetime, timezone
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import ConflictError, StoreError
from app.core.logger import logger
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse


def duplicate_name_error(name: str) -> ConflictError:
    return ConflictError(f"Product with the name '{name}' already exists.")


class ProductRepository:
    """Repository for product data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    def _doc_to_response(self, doc: dict) -> Optional[ProductResponse]:
        """Convert MongoDB document to ProductResponse schema"""
        if not doc:
            return None
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        return ProductResponse(**doc)

    async def create(self, product_data: ProductCreate) -> ProductResponse:
        """Insert a new product"""
        now = datetime.now(timezone.utc)
        doc = product_data.model_dump()
        doc.update({"created_at": now, "updated_at": now})

        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError:
            logger.warning(
                f"Duplicate product name on insert: {product_data.name}",
                metadata={"event": "product_duplicate_key", "name": product_data.name}
            )
            raise duplicate_name_error(product_data.name)
        except PyMongoError as e:
            logger.error("MongoDB error creating product", error=e, metadata={"name": product_data.name})
            raise StoreError()

        doc["_id"] = result.inserted_id
        return self._doc_to_response(doc)

    async def get_by_name(self, name: str) -> Optional[ProductResponse]:
        """Get product by its unique name"""
        try:
            doc = await self.collection.find_one({"name": name})
        except PyMongoError as e:
            logger.error("MongoDB error getting product", error=e, metadata={"name": name})
            raise StoreError()
        return self._doc_to_response(doc)

    async def exists(self, name: str) -> bool:
        """Check whether a product with this name is stored"""
        return await self.get_by_name(name) is not None

    async def list_all(self) -> List[ProductResponse]:
        """Return every product; empty list when there are none"""
        try:
            docs = await self.collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error("MongoDB error listing products", error=e)
            raise StoreError()
        return [self._doc_to_response(doc) for doc in docs]

    async def update_by_name(self, name: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        """Apply the fields that were set and return the new document"""
        update_data = product_data.model_dump(exclude_unset=True, exclude_none=True)
        if not update_data:
            return await self.get_by_name(name)

        update_data["updated_at"] = datetime.now(timezone.utc)

        try:
            doc = await self.collection.find_one_and_update(
                {"name": name},
                {"$set": update_data},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            new_name = update_data.get("name", name)
            logger.warning(
                f"Duplicate product name on update: {new_name}",
                metadata={"event": "product_duplicate_key", "name": new_name}
            )
            raise duplicate_name_error(new_name)
        except PyMongoError as e:
            logger.error("MongoDB error updating product", error=e, metadata={"name": name})
            raise StoreError()
        return self._doc_to_response(doc)

    async def delete_by_name(self, name: str) -> Optional[ProductResponse]:
        """Delete a product and return the removed document"""
        try:
            doc = await self.collection.find_one_and_delete({"name": name})
        except PyMongoError as e:
            logger.error("MongoDB error deleting product", error=e, metadata={"name": name})
            raise StoreError()
        return self._doc_to_response(doc)
