from sqlalchemy import Column, String, Boolean, DateTime, JSON, Index
from sqlalchemy.sql import func

from app.database import Base

SPECIAL_SLOTS = ("panini", "sandwich", "salad", "entree")
SOUP_SLOT_COUNT = 6


class DailyMenu(Base):
    """Menu selection for one calendar date, draft or published."""

    __tablename__ = "daily_menus"

    date = Column(String(10), primary_key=True)  # YYYY-MM-DD
    soups = Column(JSON, nullable=False, default=list)  # item ids or None, up to 6
    panini_id = Column(String(64), nullable=True)
    sandwich_id = Column(String(64), nullable=True)
    salad_id = Column(String(64), nullable=True)
    entree_id = Column(String(64), nullable=True)
    is_published = Column(Boolean, nullable=False, default=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    __table_args__ = (Index("idx_daily_menus_published", "is_published", "date"),)

    def __repr__(self):
        return f"<DailyMenu(date={self.date}, published={self.is_published})>"
