"""
Role-based access control dependencies.
"""
import logging
from typing import Any, Callable

from fastapi import Depends, HTTPException, status

from bookvibe.dependencies.auth import verify_token
from bookvibe.dependencies.store import get_user_service
from bookvibe.models.user import UserRole
from bookvibe.services.user_service import UserService

logger = logging.getLogger(__name__)


def require_roles(*allowed_roles: UserRole) -> Callable:
    """
    Dependency factory for role-based access control.

    Runs after ``verify_token`` and reads the caller's user document on every
    request.

    Usage:
        @router.get("/admin-only")
        async def admin_route(payload: dict = Depends(require_roles(UserRole.ADMIN))):
            ...

    Args:
        *allowed_roles: Roles that are allowed to access the route

    Returns:
        Dependency function that validates the caller's role
    """
    allowed = {role.value for role in allowed_roles}

    async def role_checker(
        payload: dict[str, Any] = Depends(verify_token),
        user_service: UserService = Depends(get_user_service),
    ) -> dict[str, Any]:
        email = payload.get("email")
        user = await user_service.get_user_by_email(email) if email else None

        if user is None or user.role not in allowed:
            logger.info(f"Forbidden: {email} lacks roles {sorted(allowed)}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden access",
            )

        return payload

    return role_checker


def require_admin() -> Callable:
    """
    Shortcut dependency for admin-only routes.

    Usage:
        @router.get("/admin-only")
        async def admin_route(payload: dict = Depends(require_admin())):
            ...
    """
    return require_roles(UserRole.ADMIN)
