from sqlalchemy import Column, String, Text, Boolean, JSON

from app.database import Base


class MenuItem(Base):
    """
    Server-held catalog row.

    Custom items created in the admin console live here with is_custom=True.
    Built-in seed items only get a row (is_custom=False) once an image has
    been generated for them.
    """

    __tablename__ = "menu_items"

    id = Column(String(64), primary_key=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    type = Column(String(20), nullable=False)  # soup|panini|sandwich|salad|entree
    tags = Column(JSON, nullable=False, default=list)
    price = Column(String(20), nullable=True)
    image_url = Column(Text, nullable=True)
    is_custom = Column(Boolean, nullable=False, default=True)
