"""Reservation API routes — booking, listing, cancellation and admin lifecycle."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from booking_api.application.services import reservation_service
from booking_api.domain.models.user import User
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.schemas.common import MessageResponse, Page, PageParams
from booking_api.domain.schemas.reservation import (
    ReservationCreate,
    ReservationRead,
    ReservationStatusUpdate,
)
from booking_api.interfaces.api.deps import get_current_user, get_page_params, require_admin
from booking_api.interfaces.deps import (
    get_activity_repository,
    get_apartment_repository,
    get_reservation_repository,
)

router = APIRouter(prefix="/api/reservations", tags=["Reservations"])


def _page(items, total, params: PageParams) -> Page[ReservationRead]:
    return Page[ReservationRead].build([ReservationRead.model_validate(r) for r in items], total, params)


@router.post("", response_model=ReservationRead, status_code=status.HTTP_201_CREATED)
def create_reservation(
    body: ReservationCreate,
    reservations: ReservationRepository = Depends(get_reservation_repository),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    activity: ActivityLogRepository = Depends(get_activity_repository),
    user: User = Depends(get_current_user),
):
    reservation = reservation_service.create_reservation(reservations, apartments, user, body, activity)
    return ReservationRead.model_validate(reservation)


@router.get("/my", response_model=Page[ReservationRead])
def my_reservations(
    status: Optional[str] = None,
    params: PageParams = Depends(get_page_params),
    reservations: ReservationRepository = Depends(get_reservation_repository),
    user: User = Depends(get_current_user),
):
    items, total = reservation_service.list_reservations(reservations, user.id, status, params)
    return _page(items, total, params)


@router.get("", response_model=Page[ReservationRead])
def all_reservations(
    status: Optional[str] = None,
    params: PageParams = Depends(get_page_params),
    reservations: ReservationRepository = Depends(get_reservation_repository),
    admin: User = Depends(require_admin),
):
    items, total = reservation_service.list_reservations(reservations, None, status, params)
    return _page(items, total, params)


@router.get("/{reservation_id}", response_model=ReservationRead)
def get_reservation(
    reservation_id: int,
    reservations: ReservationRepository = Depends(get_reservation_repository),
    user: User = Depends(get_current_user),
):
    return ReservationRead.model_validate(
        reservation_service.get_reservation(reservations, reservation_id, user)
    )


@router.put("/{reservation_id}/cancel", response_model=ReservationRead)
def cancel_reservation(
    reservation_id: int,
    reservations: ReservationRepository = Depends(get_reservation_repository),
    activity: ActivityLogRepository = Depends(get_activity_repository),
    user: User = Depends(get_current_user),
):
    reservation = reservation_service.cancel_reservation(reservations, reservation_id, user, activity)
    return ReservationRead.model_validate(reservation)


@router.put("/{reservation_id}/status", response_model=ReservationRead)
def update_reservation_status(
    reservation_id: int,
    body: ReservationStatusUpdate,
    reservations: ReservationRepository = Depends(get_reservation_repository),
    activity: ActivityLogRepository = Depends(get_activity_repository),
    admin: User = Depends(require_admin),
):
    reservation = reservation_service.update_status(reservations, reservation_id, body.status, admin, activity)
    return ReservationRead.model_validate(reservation)


@router.delete("/{reservation_id}", response_model=MessageResponse)
def delete_reservation(
    reservation_id: int,
    reservations: ReservationRepository = Depends(get_reservation_repository),
    activity: ActivityLogRepository = Depends(get_activity_repository),
    admin: User = Depends(require_admin),
):
    reservation_service.delete_reservation(reservations, reservation_id, admin, activity)
    return MessageResponse(message="Reservation deleted successfully")
