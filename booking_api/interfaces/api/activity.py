"""Activity log API routes — admin audit trail."""

from typing import Optional

from fastapi import APIRouter, Depends

from booking_api.application.services.activity_service import list_activity
from booking_api.domain.models.user import User
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.schemas.activity import ActivityLogRead
from booking_api.domain.schemas.common import Page, PageParams
from booking_api.interfaces.api.deps import get_page_params, require_admin
from booking_api.interfaces.deps import get_activity_repository

router = APIRouter(prefix="/api/activity", tags=["Activity"])


@router.get("", response_model=Page[ActivityLogRead])
def list_entries(
    action: Optional[str] = None,
    params: PageParams = Depends(get_page_params),
    repo: ActivityLogRepository = Depends(get_activity_repository),
    admin: User = Depends(require_admin),
):
    items, total = list_activity(repo, action, params)
    return Page[ActivityLogRead].build([ActivityLogRead.model_validate(e) for e in items], total, params)
