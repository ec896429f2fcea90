"""
Dependencies module initialization
"""

from .pipeline import RequestContext, guarded, run_guards
from .auth import authenticate, authorize, validate_credentials
from .product import (
    require_existing_product,
    require_unique_product_name,
    validate_new_product,
    validate_product_changes,
)
from .services import (
    get_auth_service,
    get_credential_service,
    get_product_repository,
    get_product_service,
    get_user_repository,
)

__all__ = [
    "RequestContext",
    "guarded",
    "run_guards",
    "authenticate",
    "authorize",
    "validate_credentials",
    "require_existing_product",
    "require_unique_product_name",
    "validate_new_product",
    "validate_product_changes",
    "get_auth_service",
    "get_credential_service",
    "get_product_repository",
    "get_product_service",
    "get_user_repository",
]
