"""Server-rendered pages: public menu, print view, TV screen and admin console."""

from datetime import date as date_cls

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from app.api.menus import valid_date
from app.database import get_db
from app.display.tv_export import render_tv_png
from app.models.user import User
from app.services.auth.dependencies import require_admin
from app.services.lead_service import LeadService
from app.services.menu_service import MenuService, to_payload
from app.services.site_service import SiteService

router = APIRouter()
templates = Jinja2Templates(directory="app/templates")


def _published_display(db: Session, date: str):
    display = MenuService.get_display_menu(db, date)
    if display is None:
        raise HTTPException(status_code=404, detail="No published menu for this date")
    return display


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, db: Session = Depends(get_db)):
    """Today's menu, or the most recent published one."""
    display = MenuService.get_display_menu(db, date_cls.today().isoformat())
    if display is None:
        latest = MenuService.get_latest_published(db)
        if latest:
            display = MenuService.resolve_display(db, to_payload(latest))

    return templates.TemplateResponse(
        request,
        "home.html",
        {"menu": display, "announcement": SiteService.get_announcement(db)},
    )


@router.get("/print/{date}", response_class=HTMLResponse)
async def print_menu(date: str, request: Request, db: Session = Depends(get_db)):
    display = _published_display(db, valid_date(date))
    return templates.TemplateResponse(request, "print.html", {"menu": display})


# Declared before /tv/{date} so the suffix is not swallowed by the date
@router.get("/tv/{date}.png")
async def tv_image(date: str, db: Session = Depends(get_db)):
    display = _published_display(db, valid_date(date))
    return Response(
        content=render_tv_png(display),
        media_type="image/png",
        headers={"Content-Disposition": f'inline; filename="menu-{date}.png"'},
    )


@router.get("/tv/{date}", response_class=HTMLResponse)
async def tv_page(date: str, request: Request, db: Session = Depends(get_db)):
    display = _published_display(db, valid_date(date))
    return templates.TemplateResponse(request, "tv.html", {"menu": display})


@router.get("/admin", response_class=HTMLResponse)
async def admin_console(
    request: Request,
    user: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "user": user,
            "menus": MenuService.list_menus(db)[:14],
            "suggestions": LeadService.list_suggestions(db),
            "enrollments": LeadService.list_enrollments(db),
            "today": date_cls.today().isoformat(),
        },
    )
