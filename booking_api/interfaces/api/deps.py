"""FastAPI dependency — JWT auth and pagination."""

from typing import Optional

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from booking_api.application.services.auth_service import decode_access_token
from booking_api.config import get_settings
from booking_api.core.exceptions import AuthenticationError, AuthorizationError
from booking_api.domain.models.user import User
from booking_api.domain.repositories.user_repository import UserRepository
from booking_api.domain.schemas.common import PageParams
from booking_api.interfaces.deps import get_user_repository

settings = get_settings()
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """Extract and validate the current user from JWT token."""
    if credentials is None:
        raise AuthenticationError("Access denied. No token provided.")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Invalid or expired token")

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise AuthenticationError("Invalid token")

    # Blocked users are soft-deleted and therefore not found
    user = users.get_by_id(int(subject))
    if user is None:
        raise AuthenticationError("User not found or blocked")

    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    if not user.is_admin:
        raise AuthorizationError("Admin privileges required")
    return user


def get_page_params(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
) -> PageParams:
    return PageParams(page=page, limit=limit)
