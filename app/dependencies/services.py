"""
Dependency injection for services and repositories
"""

from functools import lru_cache

from fastapi import Depends

from app.core.config import config
from app.db.mongodb import get_product_collection, get_user_collection
from app.repositories.product import ProductRepository
from app.repositories.user import UserRepository
from app.services.auth import AuthService
from app.services.credentials import CredentialService, CredentialSettings
from app.services.product import ProductService


@lru_cache
def get_credential_service() -> CredentialService:
    """Credential service built once from configuration"""
    return CredentialService(CredentialSettings.from_config(config))


async def get_product_repository() -> ProductRepository:
    """Get product repository instance"""
    collection = await get_product_collection()
    return ProductRepository(collection)


async def get_user_repository() -> UserRepository:
    """Get user repository instance"""
    collection = await get_user_collection()
    return UserRepository(collection)


async def get_product_service(
    repository: ProductRepository = Depends(get_product_repository)
) -> ProductService:
    """Get product service instance"""
    return ProductService(repository)


async def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    credentials: CredentialService = Depends(get_credential_service),
) -> AuthService:
    """Get auth service instance"""
    return AuthService(users, credentials)
