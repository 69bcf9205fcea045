"""Local password-based authentication provider."""
import logging
import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Optional, Set
from uuid import UUID

import bcrypt
from fastapi import Request
from sqlalchemy.orm import Session as DBSession

from app.config import settings
from app.models.user import User
from app.models.session import Session
from app.services.auth.base import AuthProvider

logger = logging.getLogger(__name__)


class UsernameTakenError(ValueError):
    """A user with this username already exists."""


class LocalAuthProvider(AuthProvider):
    """
    Username/password authentication with database-backed sessions.

    Passwords are hashed with bcrypt; session tokens are random and stored
    in the sessions table with an expiry.
    """

    def _hash_password(self, password: str) -> str:
        return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

    def _verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))

    def _generate_session_token(self) -> str:
        return secrets.token_urlsafe(32)

    def _generate_temp_password(self, length: int = 12) -> str:
        alphabet = string.ascii_letters + string.digits
        return ''.join(secrets.choice(alphabet) for _ in range(length))

    def get_user_by_username(self, db: DBSession, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username.strip()).first()

    async def authenticate(self, db: DBSession, username: str, password: str) -> Optional[User]:
        user = self.get_user_by_username(db, username)
        if not user or not user.password_hash:
            return None
        if not self._verify_password(password, user.password_hash):
            return None
        return user

    async def create_user(
        self,
        db: DBSession,
        username: str,
        password: str,
        is_admin: bool = True
    ) -> User:
        """
        Create a user with a hashed password.

        Raises:
            UsernameTakenError: the username is already registered
        """
        if self.get_user_by_username(db, username):
            raise UsernameTakenError("Username already exists")

        user = User(
            username=username.strip(),
            password_hash=self._hash_password(password),
            is_admin=is_admin
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Created user %s (admin=%s)", user.username, is_admin)
        return user

    async def get_user_from_request(self, db: DBSession, request: Request) -> Optional[User]:
        token = request.cookies.get(settings.session_cookie_name)
        if not token:
            return None

        now = datetime.now(timezone.utc)
        session = db.query(Session).filter(Session.token == token).first()
        if not session:
            return None

        expires_at = session.expires_at
        # SQLite hands back naive datetimes
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if expires_at <= now:
            return None

        return session.user

    async def create_session(self, db: DBSession, user: User, request: Request) -> str:
        token = self._generate_session_token()
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=settings.session_max_age)

        user_agent = request.headers.get("user-agent", "")[:512]
        client_ip = request.client.host if request.client else None

        session = Session(
            user_id=user.id,
            token=token,
            expires_at=expires_at,
            user_agent=user_agent,
            ip_address=client_ip
        )
        db.add(session)
        db.commit()

        return token

    async def revoke_session(self, db: DBSession, token: str) -> bool:
        session = db.query(Session).filter(Session.token == token).first()
        if not session:
            return False
        db.delete(session)
        db.commit()
        return True

    async def revoke_all_sessions(
        self,
        db: DBSession,
        user_id: UUID,
        except_token: Optional[str] = None
    ) -> int:
        query = db.query(Session).filter(Session.user_id == user_id)
        if except_token:
            query = query.filter(Session.token != except_token)
        count = query.count()
        query.delete(synchronize_session=False)
        db.commit()
        return count

    async def get_active_session_tokens(self, db: DBSession) -> Set[str]:
        now = datetime.now(timezone.utc)
        active = set()
        for token, expires_at in db.query(Session.token, Session.expires_at):
            if expires_at.tzinfo is None:
                expires_at = expires_at.replace(tzinfo=timezone.utc)
            if expires_at > now:
                active.add(token)
        return active

    async def change_password(
        self,
        db: DBSession,
        user: User,
        current_password: str,
        new_password: str
    ) -> bool:
        if not user.password_hash:
            return False
        if not self._verify_password(current_password, user.password_hash):
            return False
        user.password_hash = self._hash_password(new_password)
        db.commit()
        return True

    async def reset_password(self, db: DBSession, user: User) -> str:
        temp_password = self._generate_temp_password()
        user.password_hash = self._hash_password(temp_password)
        db.commit()
        return temp_password


# Singleton instance
local_auth_provider = LocalAuthProvider()
