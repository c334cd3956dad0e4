"""
User Repository Interface.
"""

from typing import Optional

from booking_api.domain.models.user import User
from booking_api.domain.repositories.base import BaseRepository, PageResult


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get an active user by email."""
        ...

    def get_any(self, id: int) -> Optional[User]:
        """Get a user by ID, blocked users included."""
        ...

    def email_taken(self, email: str) -> bool:
        """Whether any user, blocked or not, owns this email."""
        ...

    def list_users(self, role: Optional[str], skip: int, limit: int) -> PageResult[User]:
        """List users (blocked users included) newest first."""
        ...
