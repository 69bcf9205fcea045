from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from app.database import Base


class GeneratedImage(Base):
    """Hosted image URL produced for a catalog item (one per item)."""

    __tablename__ = "generated_images"

    item_id = Column(String(64), primary_key=True)
    image_url = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
