"""Daily menu API: public reads, admin editing, save and publish."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.user import User
from app.schemas import DailyMenuPayload, DisplayMenu, EditableMenu, validate_menu_date
from app.services.auth import get_auth_provider
from app.services.auth.dependencies import get_session_token, require_admin
from app.services.menu_service import (
    MenuSaveError,
    MenuService,
    UnsafeMenuImagesError,
    to_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["menus"])


def valid_date(date: str) -> str:
    try:
        return validate_menu_date(date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/menu/latest-published", response_model=Optional[DailyMenuPayload])
async def latest_published_menu(db: Session = Depends(get_db)):
    menu = MenuService.get_latest_published(db)
    return to_payload(menu) if menu else None


@router.get("/menu/{date}", response_model=DailyMenuPayload)
async def get_menu(date: str, db: Session = Depends(get_db)):
    """Stored menu for a date; a date with no menu returns an empty structure."""
    return MenuService.get_menu_payload(db, valid_date(date))


@router.get("/menu/{date}/display", response_model=DisplayMenu)
async def get_display_menu(date: str, db: Session = Depends(get_db)):
    display = MenuService.get_display_menu(db, valid_date(date))
    if display is None:
        raise HTTPException(status_code=404, detail="No published menu for this date")
    return display


@router.get("/menus", response_model=List[DailyMenuPayload])
async def list_menus(
    user: User = Depends(require_admin), db: Session = Depends(get_db)
):
    return [to_payload(menu) for menu in MenuService.list_menus(db)]


@router.post("/menu", response_model=DailyMenuPayload)
async def save_menu(
    payload: DailyMenuPayload,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """
    Save a draft or publish.

    Publishing is refused with 400 when any custom item lacks a hosted image;
    the response lists every offending slot.
    """
    try:
        menu = MenuService.save_menu(db, payload)
    except UnsafeMenuImagesError as e:
        raise HTTPException(
            status_code=400,
            detail={
                "message": "Some items need hosted images before this menu can be published.",
                "items": [slot.model_dump(by_alias=True) for slot in e.slots],
            },
        )
    except MenuSaveError:
        raise HTTPException(status_code=500, detail="Failed to save menu")
    return to_payload(menu)


@router.get("/admin/menu/{date}/editable", response_model=EditableMenu)
async def get_editable_menu(
    date: str,
    request: Request,
    user: User = Depends(require_admin),
    session_token: str = Depends(get_session_token),
    db: Session = Depends(get_db),
):
    """Menu prepared for the editor, carried forward at most once per date."""
    editors = request.app.state.editor_sessions
    editors.prune(await get_auth_provider().get_active_session_tokens(db))
    editor = editors.get(session_token)
    return editor.load(db, valid_date(date))
