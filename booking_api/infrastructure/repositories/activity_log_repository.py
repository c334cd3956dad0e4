"""
SQLAlchemy Implementation of Activity Log Repository.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from booking_api.core.exceptions import PersistenceError
from booking_api.domain.models.activity_log import ActivityLog
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.repositories.base import PageResult
from booking_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyActivityLogRepository(SQLAlchemyRepository[ActivityLog], ActivityLogRepository):
    """Activity log repository implementation using SQLAlchemy."""

    def record(self, entry: ActivityLog) -> ActivityLog:
        try:
            self.db.add(entry)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise PersistenceError("Could not write activity log", {"action": entry.action}) from exc
        return entry

    def list_entries(self, action: Optional[str], skip: int, limit: int) -> PageResult[ActivityLog]:
        query = self.query()
        if action:
            query = query.filter(ActivityLog.action == action)
        query = query.order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        return self.paginate(query, skip, limit)
