"""Payment domain model — maps to the 'payments' table."""

from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from booking_api.infrastructure.database import Base


class PaymentStatus:
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"

    ALL = (PENDING, COMPLETED, FAILED, REFUNDED)


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # One payment row per reservation, failed attempts included
    reservation_id = Column(Integer, ForeignKey("reservations.id"), nullable=False, unique=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    apartment_id = Column(Integer, ForeignKey("apartments.id"), nullable=False)
    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    payment_method = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default=PaymentStatus.PENDING, index=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    reservation = relationship("Reservation")

    def __repr__(self):
        return f"<Payment {self.id} res={self.reservation_id} {self.status}>"
