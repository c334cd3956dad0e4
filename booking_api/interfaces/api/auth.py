"""Auth API routes — register, login, change password, profile."""

from fastapi import APIRouter, Depends, status

from booking_api.application.services.auth_service import (
    authenticate_user,
    change_password,
    create_access_token,
    register_user,
)
from booking_api.domain.models.user import User
from booking_api.domain.repositories.user_repository import UserRepository
from booking_api.domain.schemas.auth import (
    ChangePasswordRequest,
    LoginRequest,
    TokenResponse,
    UserCreate,
    UserRead,
)
from booking_api.domain.schemas.common import MessageResponse
from booking_api.interfaces.api.deps import get_current_user
from booking_api.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, users: UserRepository = Depends(get_user_repository)):
    user = register_user(users, body)
    return TokenResponse(
        access_token=create_access_token(user),
        user=UserRead.model_validate(user),
    )


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, users: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(users, body.email, body.password)
    return TokenResponse(
        access_token=create_access_token(user),
        user=UserRead.model_validate(user),
    )


@router.put("/change-password", response_model=MessageResponse)
def update_password(
    body: ChangePasswordRequest,
    users: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    change_password(users, user, body.current_password, body.new_password)
    return MessageResponse(message="Password changed successfully")


@router.get("/profile", response_model=UserRead)
def get_profile(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)
