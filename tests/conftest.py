"""
Test configuration and fixtures for Soup Shoppe.

Implements the transaction rollback pattern:
- Session-scoped engine (in-memory SQLite unless TEST_DATABASE_URL is set)
- Function-scoped session joined to an outer transaction that is rolled back
- TestClient with database dependency override
- Authenticated client fixtures
"""

import os
import secrets
import tempfile
from datetime import datetime, timedelta, timezone
from typing import Generator

# Must be configured before the app (and its settings singleton) is imported
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite://")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ["TASK_BROKER"] = "stub"
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="soupshoppe-uploads-"))
os.environ["ADMIN_REGISTRATION_CODE"] = "let-me-in"
os.environ["RESEND_API_KEY"] = ""
os.environ["PUSHOVER_USER_KEY"] = ""
os.environ["PUSHOVER_API_TOKEN"] = ""
os.environ["IMAGE_API_KEY"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models import User, Session as UserSession


# =============================================================================
# Database Fixtures
# =============================================================================


def _create_test_engine(url: str):
    if not url.startswith("sqlite"):
        return create_engine(url)

    engine = create_engine(
        url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # pysqlite needs explicit BEGIN for SAVEPOINT to behave
    @event.listens_for(engine, "connect")
    def do_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def do_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


@pytest.fixture(scope="session")
def test_engine():
    """Create the test engine and schema once per session."""
    engine = _create_test_engine(TEST_DATABASE_URL)
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(test_engine) -> Generator[Session, None, None]:
    """
    Provide a database session that rolls back after each test.

    Service code calls commit() and rollback(); joined in savepoint mode
    those only affect a savepoint inside the outer test transaction.
    """
    connection = test_engine.connect()
    transaction = connection.begin()

    TestingSessionLocal = sessionmaker(
        bind=connection, join_transaction_mode="create_savepoint"
    )
    session = TestingSessionLocal()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


# =============================================================================
# TestClient Fixtures
# =============================================================================


def _client_for(db: Session, token: str | None = None) -> Generator[TestClient, None, None]:
    def override_get_db():
        try:
            yield db
        finally:
            pass  # Don't close - managed by db fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        if token:
            test_client.cookies.set(settings.session_cookie_name, token)
        # Set default Referer so CSRF Origin middleware allows requests
        test_client.headers["referer"] = "http://testserver/"
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(db: Session) -> Generator[TestClient, None, None]:
    """Anonymous TestClient with database dependency override."""
    yield from _client_for(db)


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
def test_user(db: Session) -> User:
    """A signed-up user without admin rights."""
    import bcrypt

    password_hash = bcrypt.hashpw(
        "testpassword123".encode("utf-8"), bcrypt.gensalt()
    ).decode("utf-8")

    user = User(username="staff", password_hash=password_hash, is_admin=False)
    db.add(user)
    db.flush()
    return user


@pytest.fixture
def admin_user(db: Session) -> User:
    import bcrypt

    password_hash = bcrypt.hashpw(
        "adminpassword123".encode("utf-8"), bcrypt.gensalt()
    ).decode("utf-8")

    user = User(username="owner", password_hash=password_hash, is_admin=True)
    db.add(user)
    db.flush()
    return user


def _session_for(db: Session, user: User) -> UserSession:
    session = UserSession(
        user_id=user.id,
        token=secrets.token_urlsafe(32),
        expires_at=datetime.now(timezone.utc) + timedelta(days=7),
        user_agent="pytest-test-client",
        ip_address="127.0.0.1",
    )
    db.add(session)
    db.flush()
    return session


@pytest.fixture
def test_session(db: Session, test_user: User) -> UserSession:
    return _session_for(db, test_user)


@pytest.fixture
def admin_session(db: Session, admin_user: User) -> UserSession:
    return _session_for(db, admin_user)


@pytest.fixture
def auth_client(db: Session, test_session: UserSession) -> Generator[TestClient, None, None]:
    """Authenticated TestClient for a non-admin user."""
    yield from _client_for(db, test_session.token)


@pytest.fixture
def admin_client(db: Session, admin_session: UserSession) -> Generator[TestClient, None, None]:
    """Authenticated TestClient for an admin user."""
    yield from _client_for(db, admin_session.token)


# =============================================================================
# Notification Fixtures
# =============================================================================


@pytest.fixture
def enqueued(monkeypatch):
    """Capture notifications queued by lead endpoints instead of sending them."""
    captured = []

    def fake_enqueue(email, push):
        captured.append((email, push))

    monkeypatch.setattr("app.workers.notification_worker.enqueue", fake_enqueue)
    return captured


# =============================================================================
# pytest markers
# =============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers",
        "security: marks tests as security tests (deselect with '-m not security')",
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
