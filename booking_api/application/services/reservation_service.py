"""Reservation service — booking and the status lifecycle."""

from datetime import datetime
from typing import Optional

import structlog

from booking_api.application.services.activity_service import record_activity
from booking_api.application.services.availability_service import validate_range
from booking_api.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from booking_api.domain.models.reservation import Reservation, ReservationStatus
from booking_api.domain.models.user import User
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.schemas.common import PageParams
from booking_api.domain.schemas.reservation import ReservationCreate

logger = structlog.get_logger(__name__)


def create_reservation(
    reservations: ReservationRepository,
    apartments: ApartmentRepository,
    user: User,
    data: ReservationCreate,
    activity: Optional[ActivityLogRepository] = None,
    now: Optional[datetime] = None,
) -> Reservation:
    """Book an apartment as `pending`.

    The apartment row stays locked from the conflict scan until the insert
    commits, so two overlapping requests cannot both succeed.
    """
    start, end = validate_range(data.start_time, data.end_time, now)

    apartment = apartments.get_for_update(data.apartment_id)
    if apartment is None:
        raise NotFoundError("Apartment", data.apartment_id)

    conflicts = reservations.find_conflicts(apartment.id, start, end)
    if conflicts:
        logger.info(
            "Reservation rejected, dates taken",
            apartment_id=apartment.id,
            user_id=user.id,
            conflicts=[r.id for r in conflicts],
        )
        raise ConflictError(
            "Apartment is not available for the selected dates",
            {"conflicting_reservation_ids": [r.id for r in conflicts]},
        )

    reservation = Reservation(
        user_id=user.id,
        apartment_id=apartment.id,
        start_time=start,
        end_time=end,
        status=ReservationStatus.PENDING,
        is_deleted=False,
    )
    reservations.add(reservation)
    reservations.commit()

    logger.info(
        "Reservation created",
        reservation_id=reservation.id,
        apartment_id=apartment.id,
        user_id=user.id,
        start_time=start.isoformat(),
        end_time=end.isoformat(),
    )
    record_activity(activity, user.id, "reservation.created", "reservation", reservation.id)
    return reservation


def _ensure_access(reservation: Reservation, user: User) -> None:
    if reservation.user_id != user.id and not user.is_admin:
        raise AuthorizationError("You can only access your own reservations")


def get_reservation(reservations: ReservationRepository, reservation_id: int, user: User) -> Reservation:
    reservation = reservations.get_by_id(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)
    _ensure_access(reservation, user)
    return reservation


def list_reservations(
    reservations: ReservationRepository,
    user_id: Optional[int],
    status: Optional[str],
    params: PageParams,
) -> PageResult[Reservation]:
    """List reservations; pass `user_id` to restrict to one owner."""
    if status and status not in ReservationStatus.ALL:
        raise ValidationError(f"Unknown reservation status '{status}'", field="status")
    return reservations.list_reservations(user_id, status, params.offset, params.limit)


def _apply_transition(reservation: Reservation, target: str) -> str:
    if not reservation.can_transition_to(target):
        raise ConflictError(
            f"Cannot change reservation status from {reservation.status} to {target}",
            {"current_status": reservation.status, "requested_status": target},
        )
    previous = reservation.status
    reservation.status = target
    return previous


def cancel_reservation(
    reservations: ReservationRepository,
    reservation_id: int,
    user: User,
    activity: Optional[ActivityLogRepository] = None,
) -> Reservation:
    """Owner cancels their own reservation; admins may cancel any."""
    reservation = reservations.get_for_update(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)
    if reservation.user_id != user.id and not user.is_admin:
        raise AuthorizationError("You can only cancel your own reservations")

    previous = _apply_transition(reservation, ReservationStatus.CANCELLED)
    reservations.commit()

    logger.info(
        "Reservation cancelled",
        reservation_id=reservation.id,
        previous_status=previous,
        by_user_id=user.id,
    )
    record_activity(activity, user.id, "reservation.cancelled", "reservation", reservation.id, previous)
    return reservation


def update_status(
    reservations: ReservationRepository,
    reservation_id: int,
    status: str,
    admin: User,
    activity: Optional[ActivityLogRepository] = None,
) -> Reservation:
    """Admin moves a reservation along the lifecycle."""
    if not admin.is_admin:
        raise AuthorizationError("Admin privileges required")
    if status not in ReservationStatus.ALL:
        raise ValidationError(f"Unknown reservation status '{status}'", field="status")

    reservation = reservations.get_for_update(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)

    previous = _apply_transition(reservation, status)
    reservations.commit()

    logger.info(
        "Reservation status updated",
        reservation_id=reservation.id,
        previous_status=previous,
        status=status,
        admin_id=admin.id,
    )
    record_activity(
        activity, admin.id, f"reservation.{status}", "reservation", reservation.id, f"{previous} -> {status}"
    )
    return reservation


def delete_reservation(
    reservations: ReservationRepository,
    reservation_id: int,
    admin: User,
    activity: Optional[ActivityLogRepository] = None,
) -> None:
    reservation = reservations.get_by_id(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)
    reservations.delete(reservation)
    logger.info("Reservation deleted", reservation_id=reservation_id, admin_id=admin.id)
    record_activity(activity, admin.id, "reservation.deleted", "reservation", reservation_id)
