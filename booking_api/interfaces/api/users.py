"""User admin API routes — list, roles, block and unblock."""

from typing import Optional

from fastapi import APIRouter, Depends

from booking_api.application.services import user_service
from booking_api.domain.models.user import User
from booking_api.domain.repositories.user_repository import UserRepository
from booking_api.domain.schemas.auth import RoleUpdate, UserRead
from booking_api.domain.schemas.common import MessageResponse, Page, PageParams
from booking_api.interfaces.api.deps import get_page_params, require_admin
from booking_api.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=Page[UserRead])
def list_users(
    role: Optional[str] = None,
    params: PageParams = Depends(get_page_params),
    users: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    """List users, blocked ones included."""
    items, total = user_service.list_users(users, role, params)
    return Page[UserRead].build([UserRead.model_validate(u) for u in items], total, params)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    users: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    return UserRead.model_validate(user_service.get_user(users, user_id))


@router.put("/{user_id}/role", response_model=MessageResponse)
def update_role(
    user_id: int,
    body: RoleUpdate,
    users: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    user_service.set_role(users, user_id, body.role, admin)
    return MessageResponse(message="User role updated successfully")


@router.put("/{user_id}/block", response_model=MessageResponse)
def block_user(
    user_id: int,
    users: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    user_service.block_user(users, user_id, admin)
    return MessageResponse(message="User blocked successfully")


@router.put("/{user_id}/unblock", response_model=MessageResponse)
def unblock_user(
    user_id: int,
    users: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    user_service.unblock_user(users, user_id, admin)
    return MessageResponse(message="User unblocked successfully")


@router.put("/{user_id}/reactivate", response_model=MessageResponse)
def reactivate_user(
    user_id: int,
    users: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    user_service.unblock_user(users, user_id, admin)
    return MessageResponse(message="User reactivated successfully")


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    users: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    user_service.block_user(users, user_id, admin)
    return MessageResponse(message="User deleted successfully")
