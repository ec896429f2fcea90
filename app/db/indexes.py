"""
Database index management for MongoDB.

The unique indexes are the final arbiter of product-name and email
uniqueness when two requests race past the existence checks.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

from app.core.logger import logger


async def create_indexes(database: AsyncIOMotorDatabase) -> None:
    """Create the unique indexes on products.name and users.email"""
    await database["products"].create_index(
        [("name", ASCENDING)],
        unique=True,
        name="idx_product_name_unique"
    )
    logger.info("Created unique index on 'products.name'")

    await database["users"].create_index(
        [("email", ASCENDING)],
        unique=True,
        name="idx_user_email_unique"
    )
    logger.info("Created unique index on 'users.email'")
