"""Business logic for daily menus: reads, carry-forward, save and publish."""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.models.daily_menu import DailyMenu, SOUP_SLOT_COUNT, SPECIAL_SLOTS
from app.schemas import (
    CatalogItem,
    DailyMenuPayload,
    DisplayMenu,
    EditableMenu,
    MenuSpecials,
    UnsafeSlot,
)
from app.seed_catalog import is_builtin
from app.services.catalog_service import CatalogService, is_hosted_image_url

logger = logging.getLogger(__name__)

SLOT_LABELS = {
    "panini": "Panini",
    "sandwich": "Sandwich",
    "salad": "Salad",
    "entree": "Entree",
}


class UnsafeMenuImagesError(Exception):
    """Publishing was refused because some items lack hosted images."""

    def __init__(self, slots: List[UnsafeSlot]):
        self.slots = slots
        names = ", ".join(f"{s.slot}: {s.item_name}" for s in slots)
        super().__init__(f"Items need hosted images before publishing: {names}")


class MenuSaveError(Exception):
    """The menu could not be written to storage."""


def empty_payload(date: str) -> DailyMenuPayload:
    """Structurally-empty placeholder returned for dates with no stored menu."""
    return DailyMenuPayload(date=date, soups=[], is_published=False)


def to_payload(menu: DailyMenu) -> DailyMenuPayload:
    return DailyMenuPayload(
        date=menu.date,
        soups=list(menu.soups or []),
        panini_id=menu.panini_id,
        sandwich_id=menu.sandwich_id,
        salad_id=menu.salad_id,
        entree_id=menu.entree_id,
        is_published=menu.is_published,
    )


def payload_specials(payload: DailyMenuPayload) -> Dict[str, Optional[str]]:
    return {slot: getattr(payload, f"{slot}_id") for slot in SPECIAL_SLOTS}


def pad_soups(soups: Sequence[Optional[str]]) -> List[Optional[str]]:
    """Exactly SOUP_SLOT_COUNT slots, padded with None."""
    padded = list(soups[:SOUP_SLOT_COUNT])
    padded.extend([None] * (SOUP_SLOT_COUNT - len(padded)))
    return padded


def is_empty_payload(payload: Optional[DailyMenuPayload]) -> bool:
    if payload is None:
        return True
    return not any(payload.soups) and not any(payload_specials(payload).values())


def resolve_editable_menu(
    stored: DailyMenuPayload,
    latest_published: Optional[DailyMenuPayload],
    default_soup_ids: Sequence[str],
    already_carried_forward: bool = False,
) -> EditableMenu:
    """
    Decide what the editor should see for a date.

    An empty, unpublished menu is pre-filled from the latest published menu
    (unless that already happened in this editing session), or from the
    default soups when nothing has ever been published. Anything else is
    returned as stored.
    """
    empty = is_empty_payload(stored)
    latest_has_content = (
        latest_published is not None and not is_empty_payload(latest_published)
    )

    if empty and not stored.is_published and latest_has_content and not already_carried_forward:
        return EditableMenu(
            date=stored.date,
            soups=pad_soups(latest_published.soups),
            specials=MenuSpecials(**payload_specials(latest_published)),
            is_published=False,
            source="carried_forward",
        )

    if not empty or stored.is_published or latest_has_content:
        return EditableMenu(
            date=stored.date,
            soups=pad_soups(stored.soups),
            specials=MenuSpecials(**payload_specials(stored)),
            is_published=stored.is_published,
            source="stored",
        )

    soups = pad_soups(stored.soups)
    for index, soup_id in enumerate(default_soup_ids[:SOUP_SLOT_COUNT]):
        soups[index] = soup_id
    return EditableMenu(
        date=stored.date,
        soups=soups,
        specials=MenuSpecials(),
        is_published=False,
        source="defaults",
    )


def resolve_item(
    item_id: Optional[str],
    catalog: Mapping[str, CatalogItem],
    snapshot: Optional[CatalogItem] = None,
) -> Optional[CatalogItem]:
    """Latest catalog data for an id, else the snapshot, else an empty slot."""
    if not item_id:
        return None
    current = catalog.get(item_id)
    if current is not None:
        return current
    if snapshot is not None and snapshot.id == item_id:
        return snapshot
    return None


def freshen_items(
    editable: EditableMenu,
    catalog: Mapping[str, CatalogItem],
    snapshots: Optional[Mapping[str, CatalogItem]] = None,
) -> Dict[str, CatalogItem]:
    """Resolve every referenced id, preferring live data over snapshots."""
    snapshots = snapshots or {}
    referenced = [*editable.soups, *editable.specials.model_dump().values()]
    items = {}
    for item_id in referenced:
        item = resolve_item(item_id, catalog, snapshots.get(item_id or ""))
        if item is not None:
            items[item_id] = item
    return items


def find_unsafe_slots(
    payload: DailyMenuPayload,
    catalog: Mapping[str, CatalogItem],
    include_soups: bool = True,
) -> List[UnsafeSlot]:
    """Every slot holding a custom item whose image is not externally hosted."""
    slots: List[tuple] = []
    if include_soups:
        slots.extend(
            (f"Soup {index + 1}", soup_id)
            for index, soup_id in enumerate(payload.soups)
        )
    slots.extend(
        (SLOT_LABELS[slot], item_id)
        for slot, item_id in payload_specials(payload).items()
    )

    unsafe = []
    for label, item_id in slots:
        if not item_id or is_builtin(item_id):
            continue
        item = catalog.get(item_id)
        if item is None:
            # Dangling reference: treated as an empty slot
            continue
        if not is_hosted_image_url(item.image_url):
            unsafe.append(UnsafeSlot(slot=label, item_id=item_id, item_name=item.name))
    return unsafe


class MenuService:
    """Service for daily menu operations."""

    @staticmethod
    def get_menu(db: Session, date: str) -> Optional[DailyMenu]:
        return db.get(DailyMenu, date)

    @staticmethod
    def get_menu_payload(db: Session, date: str) -> DailyMenuPayload:
        """Stored menu for a date, or an empty placeholder."""
        try:
            menu = db.get(DailyMenu, date)
        except SQLAlchemyError:
            logger.exception("Failed to load menu for %s", date)
            menu = None
        return to_payload(menu) if menu else empty_payload(date)

    @staticmethod
    def get_latest_published(db: Session) -> Optional[DailyMenu]:
        """Most recent published menu; lookup failures count as none."""
        try:
            return (
                db.query(DailyMenu)
                .filter(DailyMenu.is_published.is_(True))
                .order_by(DailyMenu.date.desc())
                .first()
            )
        except SQLAlchemyError:
            logger.exception("Failed to load latest published menu")
            return None

    @staticmethod
    def list_menus(db: Session) -> List[DailyMenu]:
        try:
            return db.query(DailyMenu).order_by(DailyMenu.date.desc()).all()
        except SQLAlchemyError:
            logger.exception("Failed to list menus")
            return []

    @staticmethod
    def load_editable_menu(
        db: Session,
        date: str,
        already_carried_forward: bool = False,
        snapshots: Optional[Mapping[str, CatalogItem]] = None,
    ) -> EditableMenu:
        stored = MenuService.get_menu_payload(db, date)
        latest = MenuService.get_latest_published(db)
        editable = resolve_editable_menu(
            stored,
            to_payload(latest) if latest else None,
            settings.default_soup_ids,
            already_carried_forward=already_carried_forward,
        )

        catalog = CatalogService.get_catalog_by_id(db)
        items = freshen_items(editable, catalog, snapshots)
        return editable.model_copy(update={"items": items})

    @staticmethod
    def save_menu(db: Session, payload: DailyMenuPayload) -> DailyMenu:
        """
        Upsert a menu by date.

        Publishing first checks that every custom item has a hosted image and
        rejects the whole save if any does not. Draft saves are stored as-is.

        Raises:
            UnsafeMenuImagesError: publish refused, lists every offending slot
            MenuSaveError: storage failure
        """
        if payload.is_published:
            catalog = CatalogService.get_catalog_by_id(db)
            unsafe = find_unsafe_slots(
                payload, catalog, include_soups=settings.publish_gate_checks_soups
            )
            if unsafe:
                logger.info(
                    "Publish refused for %s: %d item(s) without hosted images",
                    payload.date,
                    len(unsafe),
                )
                raise UnsafeMenuImagesError(unsafe)

        values = {
            "soups": list(payload.soups),
            "panini_id": payload.panini_id,
            "sandwich_id": payload.sandwich_id,
            "salad_id": payload.salad_id,
            "entree_id": payload.entree_id,
            "is_published": payload.is_published,
        }

        try:
            menu = db.get(DailyMenu, payload.date)
            if menu is None:
                try:
                    menu = DailyMenu(date=payload.date, **values)
                    db.add(menu)
                    db.flush()
                except IntegrityError:
                    # Race condition: another request created it, update instead
                    db.rollback()
                    menu = db.get(DailyMenu, payload.date)
                    for key, value in values.items():
                        setattr(menu, key, value)
            else:
                for key, value in values.items():
                    setattr(menu, key, value)
            db.commit()
            db.refresh(menu)
        except SQLAlchemyError as e:
            db.rollback()
            logger.exception("Failed to save menu for %s", payload.date)
            raise MenuSaveError(f"Failed to save menu for {payload.date}") from e

        logger.info(
            "Saved menu for %s (%s)",
            menu.date,
            "published" if menu.is_published else "draft",
        )
        return menu

    @staticmethod
    def get_display_menu(db: Session, date: str) -> Optional[DisplayMenu]:
        """Published menu for a date resolved against the live catalog."""
        menu = MenuService.get_menu(db, date)
        if not menu or not menu.is_published:
            return None
        return MenuService.resolve_display(db, to_payload(menu))

    @staticmethod
    def resolve_display(db: Session, payload: DailyMenuPayload) -> DisplayMenu:
        catalog = CatalogService.get_catalog_by_id(db)
        return build_display_menu(payload, catalog)


def build_display_menu(
    payload: DailyMenuPayload, catalog: Mapping[str, CatalogItem]
) -> DisplayMenu:
    return DisplayMenu(
        date=payload.date,
        soups=[resolve_item(soup_id, catalog) for soup_id in pad_soups(payload.soups)],
        specials={
            slot: resolve_item(item_id, catalog)
            for slot, item_id in payload_specials(payload).items()
        },
        is_published=payload.is_published,
    )

