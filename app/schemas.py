"""
Pydantic schemas for the JSON API.

Field names are snake_case in Python and camelCase on the wire, matching the
browser client's payloads.
"""

from datetime import date, datetime
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ItemType = Literal["soup", "panini", "sandwich", "salad", "entree"]
# Matches the String(64) id columns
ItemId = Annotated[str, Field(max_length=64)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Catalog ---


class CatalogItem(CamelModel):
    """A menu item as seen by the menu editor and the public display."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: ItemId
    name: str
    description: str = ""
    type: ItemType
    tags: list[str] = Field(default_factory=list)
    price: Optional[str] = None
    image_url: Optional[str] = None


class CustomItemIn(CamelModel):
    id: Optional[ItemId] = None  # generated when omitted
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    type: ItemType
    tags: list[str] = Field(default_factory=list)
    price: Optional[str] = None
    image_url: Optional[str] = None


class GeneratedImageItemData(CamelModel):
    name: str
    description: str = ""
    type: ItemType
    tags: list[str] = Field(default_factory=list)


class GeneratedImageIn(CamelModel):
    item_id: str = Field(min_length=1, max_length=64)
    image_url: str = Field(min_length=1)
    item_data: Optional[GeneratedImageItemData] = None


class GeneratedImageOut(CamelModel):
    item_id: ItemId
    image_url: str


class GenerateImageRequest(CamelModel):
    prompt: str = Field(min_length=1)
    size: Literal["1024x1024", "512x512", "256x256"] = "1024x1024"
    item_id: Optional[ItemId] = None


class GenerateImageResponse(CamelModel):
    url: str
    saved: bool
    is_hosted: bool


# --- Daily menu ---


def validate_menu_date(value: str) -> str:
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        raise ValueError("date must be a calendar date in YYYY-MM-DD format")
    if parsed.isoformat() != value:
        raise ValueError("date must be a calendar date in YYYY-MM-DD format")
    return value


class DailyMenuPayload(CamelModel):
    """Menu record as exchanged with the browser: item ids in every slot."""

    date: str
    soups: list[Optional[ItemId]] = Field(default_factory=list, max_length=6)
    panini_id: Optional[ItemId] = None
    sandwich_id: Optional[ItemId] = None
    salad_id: Optional[ItemId] = None
    entree_id: Optional[ItemId] = None
    is_published: bool = False

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        return validate_menu_date(value)

    @field_validator("soups")
    @classmethod
    def blank_ids_are_empty(cls, value: list[Optional[str]]) -> list[Optional[str]]:
        return [soup_id or None for soup_id in value]


class MenuSpecials(CamelModel):
    panini: Optional[str] = None
    sandwich: Optional[str] = None
    salad: Optional[str] = None
    entree: Optional[str] = None


class EditableMenu(CamelModel):
    """Menu prepared for the editor: always 6 soup slots and all four specials."""

    date: str
    soups: list[Optional[str]]
    specials: MenuSpecials
    is_published: bool
    source: Literal["stored", "carried_forward", "defaults"]
    items: dict[str, CatalogItem] = Field(default_factory=dict)


class DisplaySlot(CamelModel):
    slot: str
    item: Optional[CatalogItem] = None


class DisplayMenu(CamelModel):
    """Published menu with every slot resolved against the live catalog."""

    date: str
    soups: list[Optional[CatalogItem]]
    specials: dict[str, Optional[CatalogItem]]
    is_published: bool


class UnsafeSlot(CamelModel):
    slot: str
    item_id: str
    item_name: str


# --- Site settings ---


class AnnouncementSettings(CamelModel):
    enabled: bool = False
    title: str = ""
    message: str = ""
    background_color: str = "rgba(0, 0, 0, 0.85)"
    text_color: str = "#ffffff"


# --- Lead capture ---


class ContactRequest(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    subject: str = Field(default="Menu Inquiry", max_length=255)
    message: str = Field(min_length=1, max_length=5000)


class CateringRequest(CamelModel):
    full_name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: str = Field(min_length=1, max_length=50)
    event_date: str = Field(min_length=1, max_length=50)
    guest_count: str = Field(default="", max_length=20)
    event_type: str = Field(default="", max_length=100)
    menu_preferences: str = Field(default="", max_length=5000)
    additional_info: str = Field(default="", max_length=5000)


class MenuSuggestionIn(CamelModel):
    guest_name: str = Field(min_length=1, max_length=255)
    contact_email: Optional[str] = Field(default=None, max_length=255)
    contact_phone: Optional[str] = Field(default=None, max_length=50)
    item_name: str = Field(min_length=1, max_length=255)
    item_type: ItemType
    description: Optional[str] = Field(default=None, max_length=5000)


class MenuSuggestionOut(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    guest_name: str
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    item_name: str
    item_type: str
    description: Optional[str] = None
    status: str
    created_at: datetime


class SuggestionStatusUpdate(CamelModel):
    status: Literal["new", "reviewed", "implemented"]


class DeliveryEnrollmentIn(CamelModel):
    guest_name: str = Field(min_length=1, max_length=255)
    phone_number: str = Field(min_length=1, max_length=50)
    opt_in_confirmed: bool = False
    preferred_contact_window: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=2000)


class DeliveryEnrollmentOut(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: str
    guest_name: str
    phone_number: str
    opt_in_confirmed: bool
    preferred_contact_window: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime


# --- Auth ---


class LoginRequest(BaseModel):
    username: str
    password: str


class RegisterRequest(CamelModel):
    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=8)
    admin_code: str


class ChangePasswordRequest(CamelModel):
    current_password: str
    new_password: str = Field(min_length=8)


class UserOut(BaseModel):
    id: str
    username: str


# --- Admin export/import ---


class DataExport(CamelModel):
    menus: list[DailyMenuPayload] = Field(default_factory=list)
    custom_items: list[CatalogItem] = Field(default_factory=list)
    generated_images: list[GeneratedImageOut] = Field(default_factory=list)
    announcement: Optional[AnnouncementSettings] = None
