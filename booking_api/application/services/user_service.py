"""User service — admin user management. Blocking is a soft delete."""

from typing import Optional

import structlog

from booking_api.core.exceptions import NotFoundError, ValidationError
from booking_api.domain.models.user import ROLES, User
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.user_repository import UserRepository
from booking_api.domain.schemas.common import PageParams

logger = structlog.get_logger(__name__)


def list_users(users: UserRepository, role: Optional[str], params: PageParams) -> PageResult[User]:
    if role and role not in ROLES:
        raise ValidationError(f"Unknown role '{role}'", field="role")
    return users.list_users(role, params.offset, params.limit)


def get_user(users: UserRepository, user_id: int) -> User:
    user = users.get_any(user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def set_role(users: UserRepository, user_id: int, role: str, admin: User) -> User:
    if role not in ROLES:
        raise ValidationError(f"Unknown role '{role}'", field="role")
    user = get_user(users, user_id)
    user.role = role
    users.commit()
    logger.info("User role updated", user_id=user_id, role=role, admin_id=admin.id)
    return user


def block_user(users: UserRepository, user_id: int, admin: User) -> User:
    user = get_user(users, user_id)
    user.soft_delete()
    users.commit()
    logger.info("User blocked", user_id=user_id, admin_id=admin.id)
    return user


def unblock_user(users: UserRepository, user_id: int, admin: User) -> User:
    user = get_user(users, user_id)
    user.restore()
    users.commit()
    logger.info("User unblocked", user_id=user_id, admin_id=admin.id)
    return user
