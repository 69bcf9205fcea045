"""DeliveryEnrollment model for the text-message delivery program."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Boolean, DateTime, Index

from app.database import Base


class DeliveryEnrollment(Base):
    __tablename__ = "delivery_enrollments"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    guest_name = Column(String(255), nullable=False)
    phone_number = Column(String(50), nullable=False)
    opt_in_confirmed = Column(Boolean, nullable=False, default=False)
    preferred_contact_window = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    __table_args__ = (Index("idx_delivery_enrollments_created_at", "created_at"),)
