import logging
import time
from pathlib import Path
from urllib.parse import urlparse

from fastapi import FastAPI, Request, status
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.api import auth, catalog, leads, menus, pages, site
from app.config import settings
from app.services.file_service import UPLOAD_URL_PREFIX
from app.services.menu_editor import EditorSessionRegistry

logger = logging.getLogger(__name__)

app = FastAPI(title="Soup Shoppe", version="0.1.0")
app.state.editor_sessions = EditorSessionRegistry()


# =============================================================================
# CSRF Origin Validation Middleware
# =============================================================================


class CSRFOriginMiddleware(BaseHTTPMiddleware):
    """
    Validate Origin/Referer headers on state-changing requests to prevent CSRF.

    - POST, PUT, PATCH, DELETE must include a matching Origin or Referer header
    - GET, HEAD, OPTIONS are always allowed (safe methods)
    - Health check endpoints are exempt
    """

    SAFE_METHODS = {"GET", "HEAD", "OPTIONS"}
    EXEMPT_PATHS = {"/health"}

    def _reject(self, request: Request, reason: str, value: str):
        logger.warning(
            "CSRF %s: value=%s, expected=%s, path=%s",
            reason,
            value,
            request.headers.get("host", ""),
            request.url.path,
        )
        return JSONResponse(
            status_code=403,
            content={"detail": "Origin validation failed"},
        )

    async def dispatch(self, request: Request, call_next):
        if request.method in self.SAFE_METHODS or request.url.path in self.EXEMPT_PATHS:
            return await call_next(request)

        expected_host = request.headers.get("host", "")

        # Origin takes precedence over Referer
        for header in ("origin", "referer"):
            value = request.headers.get(header)
            if value:
                if urlparse(value).netloc != expected_host:
                    return self._reject(request, f"{header} mismatch", value)
                return await call_next(request)

        return self._reject(request, "missing origin/referer", request.method)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of API requests."""

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith("/api"):
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response


app.add_middleware(CSRFOriginMiddleware)
app.add_middleware(RequestLoggingMiddleware)

# Mount static files and locally stored uploads
Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
app.mount("/static", StaticFiles(directory="app/static"), name="static")
app.mount(UPLOAD_URL_PREFIX, StaticFiles(directory=settings.upload_dir), name="uploads")


@app.exception_handler(HTTPException)
async def auth_exception_handler(request: Request, exc: HTTPException):
    """
    Redirect to login page for 401 errors on browser page requests.
    API requests still get the JSON error response.
    """
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        accept = request.headers.get("accept", "")
        is_html_request = "text/html" in accept
        is_api = request.url.path.startswith("/api")

        if is_html_request and not is_api:
            return_url = str(request.url.path)
            if request.url.query:
                return_url += f"?{request.url.query}"
            return RedirectResponse(
                url=f"/auth/login?next={return_url}",
                status_code=status.HTTP_303_SEE_OTHER,
            )

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# Include routers
app.include_router(auth.router)
app.include_router(menus.router)
app.include_router(catalog.router)
app.include_router(leads.router)
app.include_router(site.router)
app.include_router(pages.router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
