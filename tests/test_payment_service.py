"""
Payment-reservation linking: one payment per reservation, confirmation on success.
"""

from datetime import datetime

import pytest

from booking_api.application.services import payment_service
from booking_api.core.exceptions import (
    AuthorizationError,
    ConflictError,
    DuplicatePaymentError,
    NotFoundError,
)
from booking_api.domain.models.payment import PaymentStatus
from booking_api.domain.models.reservation import ReservationStatus
from booking_api.domain.schemas.payment import PaymentCreate

from fakes import (
    FakeActivityLogRepository,
    FakeApartmentRepository,
    FakePaymentRepository,
    FakeReservationRepository,
    StubGateway,
    make_apartment,
    make_reservation,
    make_user,
)


class TestPayments:

    def setup_method(self):
        self.apartments = FakeApartmentRepository()
        self.reservations = FakeReservationRepository()
        self.payments = FakePaymentRepository()
        self.activity = FakeActivityLogRepository()
        self.apartment = make_apartment(self.apartments, price=150.0)
        self.owner = make_user(1)
        self.admin = make_user(9, role="admin")
        self.reservation = make_reservation(
            self.reservations, self.owner, self.apartment,
            datetime(2025, 5, 15), datetime(2025, 5, 18),
        )

    def pay(self, gateway=None, user=None, amount=300.0):
        return payment_service.create_payment(
            self.reservations,
            self.payments,
            gateway or StubGateway(success=True),
            user or self.owner,
            PaymentCreate(reservation_id=self.reservation.id, amount=amount, payment_method="paypal"),
            self.activity,
        )

    def test_success_confirms_pending_reservation(self):
        gateway = StubGateway(success=True)
        result = self.pay(gateway)

        assert result.payment.status == PaymentStatus.COMPLETED
        assert result.payment.amount == 300.0
        assert result.payment.user_id == self.owner.id
        assert result.reservation_status == ReservationStatus.CONFIRMED
        assert self.reservation.status == ReservationStatus.CONFIRMED
        assert gateway.charges == [(300.0, "paypal", self.reservation.id)]
        assert self.activity.rows[0].action == "payment.completed"

    def test_success_keeps_confirmed_reservation(self):
        self.reservation.status = ReservationStatus.CONFIRMED
        result = self.pay()
        assert result.reservation_status == ReservationStatus.CONFIRMED

    def test_second_payment_is_duplicate(self):
        self.pay()
        with pytest.raises(DuplicatePaymentError):
            self.pay()
        assert len(self.payments.rows) == 1

    def test_duplicate_is_a_conflict(self):
        self.pay()
        with pytest.raises(ConflictError):
            self.pay()

    def test_failed_charge_persists_failed_row(self):
        result = self.pay(StubGateway(success=False))

        assert result.message == "Payment failed"
        assert result.payment.status == PaymentStatus.FAILED
        assert self.reservation.status == ReservationStatus.PENDING
        assert len(self.payments.rows) == 1

        with pytest.raises(DuplicatePaymentError):
            self.pay()

    @pytest.mark.parametrize("status", [ReservationStatus.CANCELLED, ReservationStatus.COMPLETED])
    def test_terminal_reservation_cannot_be_paid(self, status):
        self.reservation.status = status
        gateway = StubGateway()
        with pytest.raises(ConflictError):
            self.pay(gateway)
        assert gateway.charges == []
        assert self.payments.rows == []

    def test_stranger_cannot_pay(self):
        with pytest.raises(AuthorizationError):
            self.pay(user=make_user(2))

    def test_admin_pays_on_behalf_of_owner(self):
        result = self.pay(user=self.admin)
        assert result.payment.user_id == self.owner.id

    def test_soft_deleted_reservation_not_found(self):
        self.reservation.soft_delete()
        with pytest.raises(NotFoundError):
            self.pay()

    def test_process_payment_charges_listed_price(self):
        result = payment_service.process_payment(
            self.reservations, self.payments, self.apartments, self.owner, self.reservation.id
        )
        assert result.payment.amount == 150.0
        assert result.payment.payment_method == "credit_card"
        assert result.payment.status == PaymentStatus.COMPLETED
        assert self.reservation.status == ReservationStatus.CONFIRMED

    def test_refund_only_from_completed(self):
        result = self.pay()
        refunded = payment_service.refund_payment(self.payments, result.payment.id, self.admin)
        assert refunded.status == PaymentStatus.REFUNDED
        assert self.reservation.status == ReservationStatus.CONFIRMED

        with pytest.raises(ConflictError):
            payment_service.refund_payment(self.payments, result.payment.id, self.admin)

    def test_failed_payment_cannot_be_refunded(self):
        result = self.pay(StubGateway(success=False))
        with pytest.raises(ConflictError):
            payment_service.refund_payment(self.payments, result.payment.id, self.admin)

    def test_payment_read_access(self):
        result = self.pay()
        assert payment_service.get_payment(self.payments, result.payment.id, self.owner)
        assert payment_service.get_payment(self.payments, result.payment.id, self.admin)
        with pytest.raises(AuthorizationError):
            payment_service.get_payment(self.payments, result.payment.id, make_user(2))

    def test_charge_lost_to_concurrent_insert_is_logged(self, monkeypatch):
        class RacingPaymentRepository(FakePaymentRepository):
            # The competing insert lands after the pre-check
            def get_by_reservation(self, reservation_id):
                return None

        logged = []

        class RecordingLogger:
            def error(self, event, **kw):
                logged.append((event, kw))

            def info(self, event, **kw):
                pass

        self.payments = RacingPaymentRepository()
        self.pay()
        monkeypatch.setattr(payment_service, "logger", RecordingLogger())

        gateway = StubGateway(success=True)
        with pytest.raises(DuplicatePaymentError):
            self.pay(gateway)

        assert len(gateway.charges) == 1
        assert len(self.payments.rows) == 1
        assert logged[0][1]["reference"] == "stub-ok"
        assert logged[0][1]["reservation_id"] == self.reservation.id
