"""User domain model — maps to the 'users' table."""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from booking_api.infrastructure.database import Base
from booking_api.domain.models.mixins import SoftDeleteMixin

ROLE_USER = "user"
ROLE_ADMIN = "admin"
ROLES = (ROLE_USER, ROLE_ADMIN)


class User(SoftDeleteMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_USER)  # user, admin
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    def __repr__(self):
        return f"<User {self.email}>"
