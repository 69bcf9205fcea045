"""Site announcement and admin data export/import."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas import AnnouncementSettings, DataExport
from app.services.auth.dependencies import require_admin
from app.services.site_service import SiteService

router = APIRouter(prefix="/api", tags=["site"])


@router.get("/announcement", response_model=AnnouncementSettings)
async def get_announcement(db: Session = Depends(get_db)):
    return SiteService.get_announcement(db)


@router.post("/announcement", response_model=AnnouncementSettings)
async def set_announcement(
    data: AnnouncementSettings,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return SiteService.set_announcement(db, data)


@router.get("/admin/export-data", response_model=DataExport)
async def export_data(
    user: User = Depends(require_admin), db: Session = Depends(get_db)
):
    return SiteService.export_data(db)


@router.post("/admin/import-data")
async def import_data(
    data: DataExport,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return {"success": True, "imported": SiteService.import_data(db, data)}
