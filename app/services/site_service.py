"""Site-wide settings and the admin data export/import."""

import logging

from sqlalchemy.orm import Session

from app.models.site_setting import SiteSetting
from app.schemas import AnnouncementSettings, DataExport, GeneratedImageOut
from app.services.catalog_service import CatalogService
from app.services.menu_service import MenuService, to_payload

logger = logging.getLogger(__name__)

ANNOUNCEMENT_KEY = "announcement"


class SiteService:
    @staticmethod
    def get_announcement(db: Session) -> AnnouncementSettings:
        row = db.get(SiteSetting, ANNOUNCEMENT_KEY)
        if row is None:
            return AnnouncementSettings()
        return AnnouncementSettings.model_validate(row.value)

    @staticmethod
    def set_announcement(db: Session, announcement: AnnouncementSettings) -> AnnouncementSettings:
        value = announcement.model_dump(by_alias=True)
        row = db.get(SiteSetting, ANNOUNCEMENT_KEY)
        if row is None:
            db.add(SiteSetting(key=ANNOUNCEMENT_KEY, value=value))
        else:
            row.value = value
        db.commit()
        logger.info("Announcement updated (enabled=%s)", announcement.enabled)
        return announcement

    @staticmethod
    def export_data(db: Session) -> DataExport:
        return DataExport(
            menus=[to_payload(menu) for menu in MenuService.list_menus(db)],
            custom_items=CatalogService.list_custom_items(db),
            generated_images=[
                GeneratedImageOut(item_id=image.item_id, image_url=image.image_url)
                for image in CatalogService.list_generated_images(db)
            ],
            announcement=SiteService.get_announcement(db),
        )

    @staticmethod
    def import_data(db: Session, data: DataExport) -> dict:
        """
        Restore an export. Records are upserted by their natural keys.

        Menus are written directly, bypassing the publish gate: they were
        already accepted when first saved.
        """
        CatalogService.import_items(
            db,
            data.custom_items,
            {image.item_id: image.image_url for image in data.generated_images},
        )
        for payload in data.menus:
            MenuService.save_menu(db, payload.model_copy(update={"is_published": False}))
            if payload.is_published:
                menu = MenuService.get_menu(db, payload.date)
                menu.is_published = True
                db.commit()
        if data.announcement is not None:
            SiteService.set_announcement(db, data.announcement)

        counts = {
            "menus": len(data.menus),
            "customItems": len(data.custom_items),
            "generatedImages": len(data.generated_images),
        }
        logger.info("Imported data: %s", counts)
        return counts
