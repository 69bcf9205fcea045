"""MenuSuggestion model for dishes proposed by guests."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime, Index

from app.database import Base

SUGGESTION_STATUSES = ("new", "reviewed", "implemented")


class MenuSuggestion(Base):
    __tablename__ = "menu_suggestions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    guest_name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    item_name = Column(String(255), nullable=False)
    item_type = Column(String(20), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="new")
    created_at = Column(
        DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc)
    )

    __table_args__ = (Index("idx_menu_suggestions_created_at", "created_at"),)

    def __repr__(self):
        return f"<MenuSuggestion(id={self.id}, item={self.item_name}, status={self.status})>"
