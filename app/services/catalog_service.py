"""Business logic for the item catalog: seed items, custom items and images."""

import logging
import uuid
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from urllib.parse import urlparse

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.generated_image import GeneratedImage
from app.models.menu_item import MenuItem
from app.schemas import CatalogItem, CustomItemIn, GeneratedImageItemData
from app.seed_catalog import SEED_ITEMS

logger = logging.getLogger(__name__)


def is_hosted_image_url(url: Optional[str]) -> bool:
    """True for absolute http(s) URLs; False for paths served by this process."""
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def merge_catalog(
    seed_items: Sequence[CatalogItem],
    server_items: Sequence[CatalogItem],
    generated_images: Mapping[str, str],
    local_items: Sequence[CatalogItem] = (),
) -> List[CatalogItem]:
    """
    Reconcile the seed catalog with server-held items and image URLs.

    Image URL precedence: server item row > generated image > seed default.
    Server copies win for known ids; local-only custom items (not yet saved
    to the server) are kept. Seed items come first in seed order, followed by
    custom items in server order, then local-only ones.
    """
    server_by_id = {item.id: item for item in server_items}
    seed_ids = {item.id for item in seed_items}

    def with_image(item: CatalogItem, own_image: Optional[str]) -> CatalogItem:
        image_url = own_image or generated_images.get(item.id) or item.image_url
        if image_url == item.image_url:
            return item
        return item.model_copy(update={"image_url": image_url})

    merged: List[CatalogItem] = []
    for seed in seed_items:
        server_row = server_by_id.get(seed.id)
        merged.append(with_image(seed, server_row.image_url if server_row else None))

    for item in server_items:
        if item.id not in seed_ids:
            merged.append(with_image(item, item.image_url))

    for item in local_items:
        if item.id not in seed_ids and item.id not in server_by_id:
            merged.append(with_image(item, item.image_url))

    return merged


def _row_to_item(row: MenuItem) -> CatalogItem:
    return CatalogItem(
        id=row.id,
        name=row.name,
        description=row.description or "",
        type=row.type,
        tags=list(row.tags or []),
        price=row.price,
        image_url=row.image_url,
    )


class CatalogService:
    """Service for catalog reads and writes."""

    @staticmethod
    def list_server_items(db: Session) -> List[MenuItem]:
        """All menu_items rows. Storage failures degrade to an empty list."""
        try:
            return db.query(MenuItem).order_by(MenuItem.name).all()
        except SQLAlchemyError:
            logger.exception("Failed to load menu items")
            return []

    @staticmethod
    def list_custom_items(db: Session) -> List[CatalogItem]:
        return [
            _row_to_item(row)
            for row in CatalogService.list_server_items(db)
            if row.is_custom
        ]

    @staticmethod
    def list_generated_images(db: Session) -> List[GeneratedImage]:
        try:
            return db.query(GeneratedImage).order_by(GeneratedImage.item_id).all()
        except SQLAlchemyError:
            logger.exception("Failed to load generated images")
            return []

    @staticmethod
    def get_catalog(db: Session) -> List[CatalogItem]:
        """Seed catalog merged with server items and generated images."""
        server_items = [_row_to_item(row) for row in CatalogService.list_server_items(db)]
        images = {
            image.item_id: image.image_url
            for image in CatalogService.list_generated_images(db)
        }
        return merge_catalog(SEED_ITEMS, server_items, images)

    @staticmethod
    def get_catalog_by_id(db: Session) -> Dict[str, CatalogItem]:
        return {item.id: item for item in CatalogService.get_catalog(db)}

    @staticmethod
    def save_custom_item(db: Session, data: CustomItemIn) -> CatalogItem:
        """Create or update a custom item keyed by id."""
        item_id = data.id or f"custom-{uuid.uuid4().hex}"
        row = db.get(MenuItem, item_id)
        if row is None:
            row = MenuItem(id=item_id, is_custom=True)
            db.add(row)

        row.name = data.name
        row.description = data.description or ""
        row.type = data.type
        row.tags = list(data.tags)
        row.price = data.price
        row.image_url = data.image_url or None

        db.commit()
        db.refresh(row)
        logger.info("Saved custom item %s (%s)", row.id, row.name)
        return _row_to_item(row)

    @staticmethod
    def delete_custom_item(db: Session, item_id: str) -> bool:
        """
        Delete a custom item.

        Menus that reference it keep the dangling id; readers treat it as an
        empty slot.
        """
        row = db.get(MenuItem, item_id)
        if not row or not row.is_custom:
            return False
        db.delete(row)
        generated = db.get(GeneratedImage, item_id)
        if generated:
            db.delete(generated)
        db.commit()
        return True

    @staticmethod
    def set_item_image(db: Session, item_id: str, image_url: str) -> Optional[CatalogItem]:
        """Point an existing menu_items row at a new image."""
        row = db.get(MenuItem, item_id)
        if not row:
            return None
        row.image_url = image_url
        db.commit()
        db.refresh(row)
        return _row_to_item(row)

    @staticmethod
    def save_generated_image(
        db: Session,
        item_id: str,
        image_url: str,
        item_data: Optional[GeneratedImageItemData] = None,
    ) -> GeneratedImage:
        """
        Upsert the generated image for an item.

        The matching menu_items row is updated too; when none exists and item
        data is supplied, a non-custom row is created so the image survives a
        catalog reload.
        """
        image = db.get(GeneratedImage, item_id)
        if image is None:
            image = GeneratedImage(item_id=item_id, image_url=image_url)
            db.add(image)
        else:
            image.image_url = image_url

        row = db.get(MenuItem, item_id)
        if row is not None:
            row.image_url = image_url
        elif item_data is not None:
            db.add(
                MenuItem(
                    id=item_id,
                    name=item_data.name,
                    description=item_data.description or "",
                    type=item_data.type,
                    tags=list(item_data.tags),
                    image_url=image_url,
                    is_custom=False,
                )
            )

        db.commit()
        db.refresh(image)
        return image

    @staticmethod
    def import_items(
        db: Session, items: Iterable[CatalogItem], images: Mapping[str, str]
    ) -> None:
        """Bulk upsert used by the admin data import."""
        for item in items:
            CatalogService.save_custom_item(
                db, CustomItemIn(**item.model_dump())
            )
        for item_id, image_url in images.items():
            CatalogService.save_generated_image(db, item_id, image_url)
