"""
User repository: persists and retrieves account records
"""

from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import StoreError
from app.core.logger import logger
from app.models.user import Role, User


class UserAlreadyStored(Exception):
    """The unique email index rejected an insert"""


class UserRepository:
    """Repository for user data access operations"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    def _doc_to_user(self, doc: dict) -> Optional[User]:
        if not doc:
            return None
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        return User(**doc)

    async def find_by_email(self, email: str) -> Optional[User]:
        try:
            doc = await self.collection.find_one({"email": email})
        except PyMongoError as e:
            logger.error("MongoDB error finding user", error=e)
            raise StoreError()
        return self._doc_to_user(doc)

    async def create(self, email: str, password_digest: str, role: Role = Role.USER) -> User:
        """Insert a user. Raises UserAlreadyStored when the email is taken."""
        doc = {
            "email": email,
            "password": password_digest,
            "role": role.value,
            "created_at": datetime.now(timezone.utc),
        }
        try:
            result = await self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise UserAlreadyStored(email)
        except PyMongoError as e:
            logger.error("MongoDB error creating user", error=e)
            raise StoreError()

        doc["_id"] = result.inserted_id
        return self._doc_to_user(doc)

    async def set_role(self, email: str, role: Role) -> Optional[User]:
        """Administrative role change; returns the updated user or None"""
        try:
            doc = await self.collection.find_one_and_update(
                {"email": email},
                {"$set": {"role": role.value}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error("MongoDB error updating user role", error=e)
            raise StoreError()
        return self._doc_to_user(doc)
