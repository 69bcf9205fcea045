"""Abstract base class for authentication providers."""
from abc import ABC, abstractmethod
from typing import Optional, Set
from uuid import UUID

from fastapi import Request
from sqlalchemy.orm import Session as DBSession

from app.models.user import User


class AuthProvider(ABC):
    """
    Authentication provider interface used by the admin console.

    Route code only talks to this interface, so the password/session scheme
    can be replaced without touching the API layer.
    """

    @abstractmethod
    async def authenticate(self, db: DBSession, username: str, password: str) -> Optional[User]:
        """Return the User when the credentials are valid, None otherwise."""

    @abstractmethod
    async def create_user(
        self,
        db: DBSession,
        username: str,
        password: str,
        is_admin: bool = True
    ) -> User:
        """Create a user with the given credentials."""

    @abstractmethod
    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[User]:
        """Resolve the user behind the request's session cookie, if any."""

    @abstractmethod
    async def create_session(self, db: DBSession, user: User, request: Request) -> str:
        """Create a login session and return the token for the cookie."""

    @abstractmethod
    async def revoke_session(self, db: DBSession, token: str) -> bool:
        """Invalidate a session. Returns False if the token was unknown."""

    @abstractmethod
    async def revoke_all_sessions(self, db: DBSession, user_id: UUID, except_token: Optional[str] = None) -> int:
        """Invalidate every session of a user, optionally keeping one."""

    @abstractmethod
    async def get_active_session_tokens(self, db: DBSession) -> Set[str]:
        """Tokens of every session that has not expired."""

    @abstractmethod
    async def change_password(
        self,
        db: DBSession,
        user: User,
        current_password: str,
        new_password: str
    ) -> bool:
        """
        Change a user's password.

        Returns False if the current password is incorrect.
        """

    @abstractmethod
    async def reset_password(self, db: DBSession, user: User) -> str:
        """Set a random temporary password and return it (operator use)."""
