"""Shared column mixins for domain models."""

from sqlalchemy import Boolean, Column, false


class SoftDeleteMixin:
    """Rows are flagged instead of removed; every read path filters on `active()`."""

    is_deleted = Column(Boolean, nullable=False, default=False, server_default=false())

    @classmethod
    def active(cls):
        return cls.is_deleted.is_(False)

    def soft_delete(self) -> None:
        self.is_deleted = True

    def restore(self) -> None:
        self.is_deleted = False
