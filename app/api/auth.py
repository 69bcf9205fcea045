"""Authentication routes: JSON API for the admin console plus the HTML login form."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.models.user import User
from app.schemas import ChangePasswordRequest, LoginRequest, RegisterRequest, UserOut
from app.services.auth import get_auth_provider
from app.services.auth.dependencies import get_current_user, get_optional_user
from app.services.auth.local_provider import UsernameTakenError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])
templates = Jinja2Templates(directory="app/templates")


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


def _user_out(user: User) -> UserOut:
    return UserOut(id=str(user.id), username=user.username)


# =============================================================================
# JSON API
# =============================================================================


@router.post("/api/login", response_model=UserOut)
async def api_login(
    data: LoginRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    auth_provider = get_auth_provider()
    user = await auth_provider.authenticate(db, data.username, data.password)
    if not user:
        logger.info("Failed login for %s", data.username)
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = await auth_provider.create_session(db, user, request)
    _set_session_cookie(response, token)
    return _user_out(user)


@router.post("/api/logout")
async def api_logout(request: Request, db: Session = Depends(get_db)):
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        await get_auth_provider().revoke_session(db, token)
        request.app.state.editor_sessions.discard(token)

    response = Response(status_code=200)
    response.delete_cookie(settings.session_cookie_name)
    return response


@router.get("/api/user", response_model=UserOut)
async def api_user(user: User = Depends(get_current_user)):
    return _user_out(user)


@router.post("/api/register", response_model=UserOut, status_code=201)
async def api_register(
    data: RegisterRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Create an admin account. Requires the configured registration code."""
    if not settings.admin_registration_code or data.admin_code != settings.admin_registration_code:
        raise HTTPException(
            status_code=403, detail="Registration is restricted. Invalid admin code."
        )

    auth_provider = get_auth_provider()
    try:
        user = await auth_provider.create_user(db, data.username, data.password, is_admin=True)
    except UsernameTakenError:
        raise HTTPException(status_code=400, detail="Username already exists")

    token = await auth_provider.create_session(db, user, request)
    _set_session_cookie(response, token)
    return _user_out(user)


@router.post("/api/change-password")
async def api_change_password(
    data: ChangePasswordRequest,
    request: Request,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Change the caller's password and sign out their other sessions."""
    auth_provider = get_auth_provider()
    changed = await auth_provider.change_password(
        db, user, data.current_password, data.new_password
    )
    if not changed:
        raise HTTPException(status_code=400, detail="Current password is incorrect")

    current_token = request.cookies.get(settings.session_cookie_name)
    revoked = await auth_provider.revoke_all_sessions(db, user.id, except_token=current_token)
    request.app.state.editor_sessions.prune(await auth_provider.get_active_session_tokens(db))
    logger.info("Password changed for %s; revoked %d other session(s)", user.username, revoked)
    return {"success": True}


# =============================================================================
# HTML login form
# =============================================================================


@router.get("/auth/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    next: Optional[str] = Query(None),
    error: Optional[str] = Query(None),
    user: Optional[User] = Depends(get_optional_user),
):
    """Login page. Redirects to the admin console if already logged in."""
    if user:
        return RedirectResponse(url="/admin", status_code=303)

    return templates.TemplateResponse(
        request, "auth/login.html", {"next": next, "error": error}
    )


@router.post("/auth/login")
async def login_form(
    request: Request,
    username: str = Form(...),
    password: str = Form(...),
    next: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    auth_provider = get_auth_provider()
    user = await auth_provider.authenticate(db, username, password)

    if not user:
        return RedirectResponse(url="/auth/login?error=invalid", status_code=303)

    token = await auth_provider.create_session(db, user, request)

    # Only same-site relative redirects
    redirect_url = next if next and next.startswith("/") and not next.startswith("//") else "/admin"
    response = RedirectResponse(url=redirect_url, status_code=status.HTTP_303_SEE_OTHER)
    _set_session_cookie(response, token)
    return response
