"""
Users router for registration, admin status and admin management.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from bookvibe.dependencies.auth import TokenPayload
from bookvibe.dependencies.roles import require_admin
from bookvibe.dependencies.store import get_user_service
from bookvibe.models.user import User
from bookvibe.schemas.auth import AdminStatusResponse
from bookvibe.schemas.results import DeleteResultResponse, UpdateResultResponse
from bookvibe.schemas.user import RegisterResponse, UserCreate
from bookvibe.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=list[User],
    summary="List users",
    dependencies=[Depends(require_admin())],
)
async def list_users(
    user_service: UserService = Depends(get_user_service),
):
    """
    List every registered user.

    **Admin only.** Requires `Authorization: Bearer <token>`.
    """
    return await user_service.list_users()


@router.get(
    "/admin/{email}",
    response_model=AdminStatusResponse,
    summary="Check admin status",
)
async def check_admin(
    email: str,
    payload: TokenPayload,
    user_service: UserService = Depends(get_user_service),
):
    """
    Report whether `email` holds the admin role.

    Callers may only ask about their own email. Requires
    `Authorization: Bearer <token>`.
    """
    if email != payload.get("email"):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden access",
        )

    return AdminStatusResponse(admin=await user_service.is_admin(email))


@router.post(
    "",
    response_model=RegisterResponse,
    response_model_exclude_unset=True,
    summary="Register a user",
)
async def register_user(
    body: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a user on first sign-in.

    - **email**: Valid email address
    - **name**, **photoURL**: Optional profile fields

    An email that is already registered is a no-op answering
    `{"message": "User already exists", "insertedId": null}`.
    """
    return await user_service.register_user(body)


@router.patch(
    "/admin/{user_id}",
    response_model=UpdateResultResponse,
    summary="Promote user to admin",
    dependencies=[Depends(require_admin())],
)
async def promote_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
):
    """
    Set the admin role on a user.

    **Admin only.** Requires `Authorization: Bearer <token>`.
    """
    try:
        return await user_service.promote_to_admin(user_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete(
    "/{user_id}",
    response_model=DeleteResultResponse,
    summary="Delete user",
    dependencies=[Depends(require_admin())],
)
async def delete_user(
    user_id: str,
    user_service: UserService = Depends(get_user_service),
):
    """
    Delete a user.

    An unknown id is not an error: the response reports `deletedCount: 0`.

    **Admin only.** Requires `Authorization: Bearer <token>`.
    """
    try:
        return await user_service.delete_user(user_id)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
