"""Payment service — links one payment to a reservation and confirms it on success."""

from typing import Optional

import structlog

from booking_api.application.services.activity_service import record_activity
from booking_api.core.exceptions import (
    AuthorizationError,
    ConflictError,
    DuplicatePaymentError,
    NotFoundError,
)
from booking_api.domain.models.payment import Payment, PaymentStatus
from booking_api.domain.models.reservation import Reservation, ReservationStatus
from booking_api.domain.models.user import User
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.payment_repository import PaymentRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.schemas.common import PageParams
from booking_api.domain.schemas.payment import PaymentCreate, PaymentRead, PaymentResult
from booking_api.infrastructure.payment_gateway import ApprovingPaymentGateway, PaymentGateway

logger = structlog.get_logger(__name__)

DEFAULT_PAYMENT_METHOD = "credit_card"


def _load_payable(
    reservations: ReservationRepository,
    payments: PaymentRepository,
    reservation_id: int,
    user: User,
) -> Reservation:
    reservation = reservations.get_for_update(reservation_id)
    if reservation is None:
        raise NotFoundError("Reservation", reservation_id)
    if reservation.user_id != user.id and not user.is_admin:
        raise AuthorizationError("You can only pay for your own reservations")
    if reservation.status not in ReservationStatus.ACTIVE:
        raise ConflictError(
            f"Cannot pay for a {reservation.status} reservation",
            {"reservation_status": reservation.status},
        )
    if payments.get_by_reservation(reservation.id) is not None:
        raise DuplicatePaymentError()
    return reservation


def _settle(
    reservations: ReservationRepository,
    payments: PaymentRepository,
    gateway: PaymentGateway,
    reservation: Reservation,
    amount: float,
    payment_method: str,
    user: User,
    activity: Optional[ActivityLogRepository],
) -> PaymentResult:
    outcome = gateway.charge(amount, payment_method, reservation.id)

    payment = Payment(
        reservation_id=reservation.id,
        user_id=reservation.user_id,
        apartment_id=reservation.apartment_id,
        amount=amount,
        payment_method=payment_method,
        status=PaymentStatus.COMPLETED if outcome.success else PaymentStatus.FAILED,
    )
    try:
        payments.add(payment)
    except DuplicatePaymentError:
        if outcome.success:
            # Charge went through but the row lost a concurrent insert
            logger.error(
                "Charge not recorded, payment already exists",
                reservation_id=reservation.id,
                amount=amount,
                reference=outcome.reference,
            )
        raise
    if outcome.success and reservation.status == ReservationStatus.PENDING:
        reservation.status = ReservationStatus.CONFIRMED
    # Payment row and reservation promotion land in one commit
    reservations.commit()

    logger.info(
        "Payment processed",
        payment_id=payment.id,
        reservation_id=reservation.id,
        status=payment.status,
        amount=amount,
        reference=outcome.reference,
        reason=outcome.reason,
    )
    record_activity(activity, user.id, f"payment.{payment.status}", "payment", payment.id)

    return PaymentResult(
        message="Payment processed successfully" if outcome.success else "Payment failed",
        payment=PaymentRead.model_validate(payment, from_attributes=True),
        reservation_status=reservation.status,
    )


def create_payment(
    reservations: ReservationRepository,
    payments: PaymentRepository,
    gateway: PaymentGateway,
    user: User,
    data: PaymentCreate,
    activity: Optional[ActivityLogRepository] = None,
) -> PaymentResult:
    """Charge a caller-supplied amount through the gateway."""
    reservation = _load_payable(reservations, payments, data.reservation_id, user)
    return _settle(
        reservations, payments, gateway, reservation, data.amount, data.payment_method, user, activity
    )


def process_payment(
    reservations: ReservationRepository,
    payments: PaymentRepository,
    apartments: ApartmentRepository,
    user: User,
    reservation_id: int,
    activity: Optional[ActivityLogRepository] = None,
) -> PaymentResult:
    """Simplified flow: charge the listed price and always succeed."""
    reservation = _load_payable(reservations, payments, reservation_id, user)
    apartment = apartments.get_by_id(reservation.apartment_id)
    if apartment is None:
        raise NotFoundError("Apartment", reservation.apartment_id)
    return _settle(
        reservations,
        payments,
        ApprovingPaymentGateway(),
        reservation,
        apartment.price,
        DEFAULT_PAYMENT_METHOD,
        user,
        activity,
    )


def get_payment(payments: PaymentRepository, payment_id: int, user: User) -> Payment:
    payment = payments.get_by_id(payment_id)
    if payment is None:
        raise NotFoundError("Payment", payment_id)
    if payment.user_id != user.id and not user.is_admin:
        raise AuthorizationError("You can only access your own payments")
    return payment


def list_payments(payments: PaymentRepository, user_id: Optional[int], params: PageParams) -> PageResult[Payment]:
    return payments.list_payments(user_id, params.offset, params.limit)


def refund_payment(
    payments: PaymentRepository,
    payment_id: int,
    admin: User,
    activity: Optional[ActivityLogRepository] = None,
) -> Payment:
    """Admin refund; the reservation status is left as it is."""
    payment = payments.get_by_id(payment_id)
    if payment is None:
        raise NotFoundError("Payment", payment_id)
    if payment.status != PaymentStatus.COMPLETED:
        raise ConflictError(
            f"Only completed payments can be refunded (current status: {payment.status})",
            {"payment_status": payment.status},
        )
    payment.status = PaymentStatus.REFUNDED
    payments.commit()

    logger.info("Payment refunded", payment_id=payment.id, reservation_id=payment.reservation_id, admin_id=admin.id)
    record_activity(activity, admin.id, "payment.refunded", "payment", payment.id)
    return payment
