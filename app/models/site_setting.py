from sqlalchemy import Column, String, JSON

from app.database import Base


class SiteSetting(Base):
    """Key/value site configuration editable from the admin console."""

    __tablename__ = "site_settings"

    key = Column(String(100), primary_key=True)
    value = Column(JSON, nullable=False)
