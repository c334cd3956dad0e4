"""Payment API routes — pay for a reservation, list payments, refunds."""

from fastapi import APIRouter, Depends, status

from booking_api.application.services import payment_service
from booking_api.domain.models.user import User
from booking_api.domain.repositories.activity_log_repository import ActivityLogRepository
from booking_api.domain.repositories.apartment_repository import ApartmentRepository
from booking_api.domain.repositories.payment_repository import PaymentRepository
from booking_api.domain.repositories.reservation_repository import ReservationRepository
from booking_api.domain.schemas.common import Page, PageParams
from booking_api.domain.schemas.payment import (
    PaymentCreate,
    PaymentProcessRequest,
    PaymentRead,
    PaymentResult,
)
from booking_api.infrastructure.payment_gateway import PaymentGateway
from booking_api.interfaces.api.deps import get_current_user, get_page_params, require_admin
from booking_api.interfaces.deps import (
    get_activity_repository,
    get_apartment_repository,
    get_payment_gateway,
    get_payment_repository,
    get_reservation_repository,
)

router = APIRouter(prefix="/api/payments", tags=["Payments"])


def _page(items, total, params: PageParams) -> Page[PaymentRead]:
    return Page[PaymentRead].build([PaymentRead.model_validate(p) for p in items], total, params)


@router.post("", response_model=PaymentResult, status_code=status.HTTP_201_CREATED)
def create_payment(
    body: PaymentCreate,
    reservations: ReservationRepository = Depends(get_reservation_repository),
    payments: PaymentRepository = Depends(get_payment_repository),
    gateway: PaymentGateway = Depends(get_payment_gateway),
    activity: ActivityLogRepository = Depends(get_activity_repository),
    user: User = Depends(get_current_user),
):
    """Charge the given amount through the payment gateway."""
    return payment_service.create_payment(reservations, payments, gateway, user, body, activity)


@router.post("/process", response_model=PaymentResult, status_code=status.HTTP_201_CREATED)
def process_payment(
    body: PaymentProcessRequest,
    reservations: ReservationRepository = Depends(get_reservation_repository),
    payments: PaymentRepository = Depends(get_payment_repository),
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    activity: ActivityLogRepository = Depends(get_activity_repository),
    user: User = Depends(get_current_user),
):
    """Pay the apartment's listed price for a reservation."""
    return payment_service.process_payment(
        reservations, payments, apartments, user, body.reservation_id, activity
    )


@router.get("/my", response_model=Page[PaymentRead])
def my_payments(
    params: PageParams = Depends(get_page_params),
    payments: PaymentRepository = Depends(get_payment_repository),
    user: User = Depends(get_current_user),
):
    items, total = payment_service.list_payments(payments, user.id, params)
    return _page(items, total, params)


@router.get("", response_model=Page[PaymentRead])
def all_payments(
    params: PageParams = Depends(get_page_params),
    payments: PaymentRepository = Depends(get_payment_repository),
    admin: User = Depends(require_admin),
):
    items, total = payment_service.list_payments(payments, None, params)
    return _page(items, total, params)


@router.get("/{payment_id}", response_model=PaymentRead)
def get_payment(
    payment_id: int,
    payments: PaymentRepository = Depends(get_payment_repository),
    user: User = Depends(get_current_user),
):
    return PaymentRead.model_validate(payment_service.get_payment(payments, payment_id, user))


@router.put("/{payment_id}/refund", response_model=PaymentRead)
def refund_payment(
    payment_id: int,
    payments: PaymentRepository = Depends(get_payment_repository),
    activity: ActivityLogRepository = Depends(get_activity_repository),
    admin: User = Depends(require_admin),
):
    return PaymentRead.model_validate(payment_service.refund_payment(payments, payment_id, admin, activity))
