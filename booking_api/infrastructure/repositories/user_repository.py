"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from sqlalchemy import func

from booking_api.domain.models.user import User
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.user_repository import UserRepository
from booking_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    conflict_message = "User already exists"

    def get_by_email(self, email: str) -> Optional[User]:
        return self.query().filter(func.lower(User.email) == email.lower()).first()

    def get_any(self, id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == id).first()

    def email_taken(self, email: str) -> bool:
        query = self.db.query(User.id).filter(func.lower(User.email) == email.lower())
        return self.db.query(query.exists()).scalar()

    def list_users(self, role: Optional[str], skip: int, limit: int) -> PageResult[User]:
        query = self.db.query(User)
        if role:
            query = query.filter(User.role == role)
        query = query.order_by(User.created_at.desc(), User.id.desc())
        return self.paginate(query, skip, limit)
