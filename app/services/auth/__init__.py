"""
Authentication for the admin console.

Usage:
    from app.services.auth import get_auth_provider
    from app.services.auth.dependencies import get_current_user, require_admin

    @router.post("/api/menu")
    async def save_menu(user: User = Depends(require_admin)):
        ...
"""
from app.services.auth.base import AuthProvider
from app.services.auth.local_provider import local_auth_provider


def get_auth_provider() -> AuthProvider:
    """Return the configured auth provider (local password auth)."""
    return local_auth_provider


__all__ = [
    "AuthProvider",
    "get_auth_provider",
    "local_auth_provider",
]
