"""Auth service — JWT token management and password hashing."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext

from booking_api.config import get_settings
from booking_api.core.exceptions import AuthenticationError, ConflictError, ValidationError
from booking_api.domain.models.user import ROLE_ADMIN, ROLE_USER, User
from booking_api.domain.repositories.user_repository import UserRepository
from booking_api.domain.schemas.auth import UserCreate

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode = {"sub": str(user.id), "role": user.role, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def authenticate_user(users: UserRepository, email: str, password: str) -> User:
    user = users.get_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        logger.info("Login failed", email=email)
        raise AuthenticationError("Invalid credentials")
    return user


def create_user(users: UserRepository, name: str, email: str, password: str, role: str = ROLE_USER) -> User:
    user = User(
        name=name,
        email=email.lower(),
        password_hash=hash_password(password),
        role=role,
        is_deleted=False,
    )
    return users.create(user)


def register_user(users: UserRepository, data: UserCreate) -> User:
    if users.email_taken(data.email):
        raise ConflictError("User already exists", {"email": data.email})
    user = create_user(users, data.name, data.email, data.password)
    logger.info("User registered", user_id=user.id)
    return user


def change_password(users: UserRepository, user: User, current_password: str, new_password: str) -> None:
    if not verify_password(current_password, user.password_hash):
        raise ValidationError("Current password is incorrect", field="current_password")
    user.password_hash = hash_password(new_password)
    users.commit()
    logger.info("Password changed", user_id=user.id)


def ensure_default_admin(users: UserRepository) -> Optional[User]:
    """Create the bootstrap admin when its email is not registered yet."""
    if users.email_taken(settings.DEFAULT_ADMIN_EMAIL):
        return None
    admin = create_user(
        users,
        name=settings.DEFAULT_ADMIN_NAME,
        email=settings.DEFAULT_ADMIN_EMAIL,
        password=settings.DEFAULT_ADMIN_PASSWORD,
        role=ROLE_ADMIN,
    )
    logger.info("Default admin user created", email=admin.email)
    return admin
