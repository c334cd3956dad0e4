"""Activity service — best-effort audit trail of lifecycle and payment actions."""

from typing import Optional

import structlog

from booking_api.core.exceptions import PersistenceError
from booking_api.domain.models.activity_log import ActivityLog
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.schemas.common import PageParams

logger = structlog.get_logger(__name__)


def record_activity(
    repo: Optional[ActivityLogRepository],
    user_id: Optional[int],
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    details: Optional[str] = None,
) -> None:
    """Write an audit entry after the primary change has committed.

    A failure here never undoes or fails the primary action.
    """
    if repo is None:
        return
    entry = ActivityLog(
        user_id=user_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        details=details,
    )
    try:
        repo.record(entry)
    except PersistenceError as exc:
        logger.warning("Activity log write failed", action=action, entity_id=entity_id, error=exc.message)


def list_activity(repo: ActivityLogRepository, action: Optional[str], params: PageParams) -> PageResult[ActivityLog]:
    return repo.list_entries(action, params.offset, params.limit)
