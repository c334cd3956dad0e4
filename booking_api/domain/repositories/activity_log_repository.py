"""
Activity Log Repository Interface.
"""

from typing import Optional

from booking_api.domain.models.activity_log import ActivityLog
from booking_api.domain.repositories.base import BaseRepository, PageResult


class ActivityLogRepository(BaseRepository[ActivityLog]):
    """Interface for the audit trail."""

    def record(self, entry: ActivityLog) -> ActivityLog:
        """Insert and commit an entry; raises PersistenceError on store failure."""
        ...

    def list_entries(self, action: Optional[str], skip: int, limit: int) -> PageResult[ActivityLog]:
        ...
