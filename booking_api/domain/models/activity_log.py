"""Activity log — audit trail of reservation and payment actions."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from booking_api.infrastructure.database import Base


class ActivityLog(Base):
    __tablename__ = "activity_log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=True, index=True)
    action = Column(String(50), nullable=False, index=True)  # reservation.created, payment.refunded, ...
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(Integer, nullable=True)
    details = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self):
        return f"<ActivityLog {self.action} {self.entity_type}={self.entity_id}>"
