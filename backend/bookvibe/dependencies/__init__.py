"""
Dependencies for dependency injection in routes.
"""
from bookvibe.dependencies.auth import TokenPayload, verify_token
from bookvibe.dependencies.roles import require_admin, require_roles
from bookvibe.dependencies.store import (
    get_cart_service,
    get_catalog_service,
    get_store,
    get_user_service,
)

__all__ = [
    "TokenPayload",
    "verify_token",
    "require_roles",
    "require_admin",
    "get_store",
    "get_user_service",
    "get_catalog_service",
    "get_cart_service",
]
