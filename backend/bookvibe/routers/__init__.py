"""
API Routers module.
"""
from bookvibe.routers import auth, carts, catalog, health, users

__all__ = ["auth", "carts", "catalog", "health", "users"]
