"""
Database models for Soup Shoppe.

Import all models here so Alembic can detect them for migrations.
"""

from app.database import Base
from app.models.user import User
from app.models.session import Session
from app.models.daily_menu import DailyMenu, SPECIAL_SLOTS, SOUP_SLOT_COUNT
from app.models.menu_item import MenuItem
from app.models.generated_image import GeneratedImage
from app.models.site_setting import SiteSetting
from app.models.menu_suggestion import MenuSuggestion, SUGGESTION_STATUSES
from app.models.delivery_enrollment import DeliveryEnrollment

__all__ = [
    "Base",
    "User",
    "Session",
    "DailyMenu",
    "SPECIAL_SLOTS",
    "SOUP_SLOT_COUNT",
    "MenuItem",
    "GeneratedImage",
    "SiteSetting",
    "MenuSuggestion",
    "SUGGESTION_STATUSES",
    "DeliveryEnrollment",
]
