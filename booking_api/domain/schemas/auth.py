"""Pydantic schemas for User and Auth."""

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from booking_api.domain.schemas.common import UTCDateTime


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    role: str
    is_deleted: bool = False
    created_at: Optional[UTCDateTime] = None

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=128)


class RoleUpdate(BaseModel):
    role: Literal["user", "admin"]
