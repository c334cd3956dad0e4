"""
SQLAlchemy Implementation of Payment Repository.
"""

from typing import Optional

from booking_api.core.exceptions import DuplicatePaymentError
from booking_api.domain.models.payment import Payment
from booking_api.domain.repositories.base import PageResult
from booking_api.domain.repositories.payment_repository import PaymentRepository
from booking_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyPaymentRepository(SQLAlchemyRepository[Payment], PaymentRepository):
    """Payment repository implementation using SQLAlchemy.

    The UNIQUE constraint on reservation_id turns a concurrent second insert
    into DuplicatePaymentError.
    """

    conflict_error = DuplicatePaymentError
    conflict_message = DuplicatePaymentError.default_message

    def get_by_reservation(self, reservation_id: int) -> Optional[Payment]:
        return self.query().filter(Payment.reservation_id == reservation_id).first()

    def list_payments(self, user_id: Optional[int], skip: int, limit: int) -> PageResult[Payment]:
        query = self.query()
        if user_id is not None:
            query = query.filter(Payment.user_id == user_id)
        query = query.order_by(Payment.created_at.desc(), Payment.id.desc())
        return self.paginate(query, skip, limit)
