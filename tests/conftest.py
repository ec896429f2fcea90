"""Shared test fixtures"""
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.dependencies.services import (
    get_credential_service,
    get_product_repository,
    get_user_repository,
)
from app.models.user import Role, User
from app.repositories.product import duplicate_name_error
from app.repositories.user import UserAlreadyStored
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.credentials import CredentialService, CredentialSettings

TEST_SECRET = "test-secret"


class InMemoryProductRepository:
    """Product store double keyed by name"""

    def __init__(self):
        self.products: Dict[str, ProductResponse] = {}

    async def create(self, product_data: ProductCreate) -> ProductResponse:
        if product_data.name in self.products:
            raise duplicate_name_error(product_data.name)
        now = datetime.now(timezone.utc)
        product = ProductResponse(
            id=uuid.uuid4().hex, created_at=now, updated_at=now, **product_data.model_dump()
        )
        self.products[product.name] = product
        return product

    async def get_by_name(self, name: str) -> Optional[ProductResponse]:
        return self.products.get(name)

    async def exists(self, name: str) -> bool:
        return name in self.products

    async def list_all(self) -> List[ProductResponse]:
        return list(self.products.values())

    async def update_by_name(self, name: str, product_data: ProductUpdate) -> Optional[ProductResponse]:
        current = self.products.get(name)
        if current is None:
            return None
        changes = product_data.model_dump(exclude_unset=True, exclude_none=True)
        if not changes:
            return current
        updated = current.model_copy(update={**changes, "updated_at": datetime.now(timezone.utc)})
        del self.products[name]
        self.products[updated.name] = updated
        return updated

    async def delete_by_name(self, name: str) -> Optional[ProductResponse]:
        return self.products.pop(name, None)


class InMemoryUserRepository:
    """User store double keyed by email"""

    def __init__(self):
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        return self.users.get(email)

    async def create(self, email: str, password_digest: str, role: Role = Role.USER) -> User:
        if email in self.users:
            raise UserAlreadyStored(email)
        user = User(id=uuid.uuid4().hex, email=email, password=password_digest, role=role)
        self.users[email] = user
        return user

    async def set_role(self, email: str, role: Role) -> Optional[User]:
        user = self.users.get(email)
        if user is None:
            return None
        self.users[email] = user.model_copy(update={"role": role})
        return self.users[email]


@pytest.fixture
def credential_settings():
    """Cheap bcrypt cost keeps the suite fast"""
    return CredentialSettings(secret=TEST_SECRET, bcrypt_rounds=4)


@pytest.fixture
def credential_service(credential_settings):
    return CredentialService(credential_settings)


@pytest.fixture
def product_repository():
    return InMemoryProductRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def client(credential_service, product_repository, user_repository):
    """TestClient wired to in-memory stores; lifespan (MongoDB) is not started"""
    from main import app

    app.dependency_overrides[get_credential_service] = lambda: credential_service
    app.dependency_overrides[get_product_repository] = lambda: product_repository
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_token(credential_service):
    return credential_service.issue_token("user-1", Role.USER)


@pytest.fixture
def admin_token(credential_service):
    return credential_service.issue_token("admin-1", Role.ADMIN)


@pytest.fixture
def user_headers(user_token):
    return {"Authorization": f"Bearer {user_token}"}


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
