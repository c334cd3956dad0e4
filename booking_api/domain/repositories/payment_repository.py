"""
Payment Repository Interface.
"""

from typing import Optional

from booking_api.domain.models.payment import Payment
from booking_api.domain.repositories.base import BaseRepository, PageResult


class PaymentRepository(BaseRepository[Payment]):
    """Interface for Payment-specific operations.

    `add` raises DuplicatePaymentError when the reservation already has a payment.
    """

    def get_by_reservation(self, reservation_id: int) -> Optional[Payment]:
        """Get the payment attached to a reservation."""
        ...

    def list_payments(self, user_id: Optional[int], skip: int, limit: int) -> PageResult[Payment]:
        """List payments, optionally for one user."""
        ...
