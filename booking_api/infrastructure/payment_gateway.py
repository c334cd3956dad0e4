"""Payment gateway client.

The booking flow only needs a yes/no charge outcome; real processors plug in
behind the PaymentGateway protocol.
"""

import random
from dataclasses import dataclass
from typing import Optional, Protocol

import structlog

from booking_api.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ChargeResult:
    success: bool
    reference: Optional[str] = None
    reason: Optional[str] = None


class PaymentGateway(Protocol):
    def charge(self, amount: float, payment_method: str, reservation_id: int) -> ChargeResult:
        ...


class SimulatedPaymentGateway:
    """Stand-in processor that approves a configurable share of charges."""

    def __init__(self, success_rate: Optional[float] = None, rng: Optional[random.Random] = None):
        self.success_rate = settings.PAYMENT_SUCCESS_RATE if success_rate is None else success_rate
        self.rng = rng or random.Random()

    def charge(self, amount: float, payment_method: str, reservation_id: int) -> ChargeResult:
        approved = self.rng.random() < self.success_rate
        logger.info(
            "Simulated charge",
            reservation_id=reservation_id,
            amount=amount,
            payment_method=payment_method,
            approved=approved,
        )
        if approved:
            return ChargeResult(success=True, reference=f"sim-{reservation_id}-{self.rng.randrange(10**8):08d}")
        return ChargeResult(success=False, reason="Payment declined")


class ApprovingPaymentGateway:
    """Gateway that approves every charge; used by the simplified payment flow."""

    def charge(self, amount: float, payment_method: str, reservation_id: int) -> ChargeResult:
        return ChargeResult(success=True, reference=f"direct-{reservation_id}")
