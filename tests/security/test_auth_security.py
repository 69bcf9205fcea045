"""
Security tests for authentication and authorization.

Tests security aspects including:
- Session security
- Access control on admin endpoints
- CSRF origin validation
"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import settings
from app.main import app
from app.database import get_db
from tests.factories import create_session, create_user

ADMIN_ENDPOINTS = [
    ("get", "/api/menus", None),
    ("post", "/api/menu", {"date": "2024-01-15", "soups": []}),
    ("get", "/api/admin/menu/2024-01-15/editable", None),
    ("post", "/api/custom-items", {"name": "X", "type": "soup"}),
    ("delete", "/api/custom-items/custom-1", None),
    ("post", "/api/generated-images", {"itemId": "s6", "imageUrl": "https://x/y.png"}),
    ("post", "/api/generate-image", {"prompt": "Soup"}),
    ("post", "/api/announcement", {"enabled": True}),
    ("get", "/api/admin/menu-suggestions", None),
    ("get", "/api/admin/delivery-enrollments", None),
    ("get", "/api/admin/delivery-enrollments/csv", None),
    ("get", "/api/admin/export-data", None),
    ("post", "/api/admin/import-data", {}),
]


def call(client: TestClient, method: str, path: str, body):
    if body is None:
        return getattr(client, method)(path)
    return client.request(method.upper(), path, json=body)


@pytest.mark.security
class TestSessionSecurity:
    """Tests for session security."""

    def test_session_token_not_guessable(self, db: Session):
        user = create_user(db)

        tokens = [create_session(db, user).token for _ in range(50)]

        assert len(set(tokens)) == 50
        assert all(len(token) >= 32 for token in tokens)

    def test_expired_session_rejected(self, client: TestClient, db: Session):
        user = create_user(db)
        session = create_session(db, user, expires_in=timedelta(days=-1))

        client.cookies.set(settings.session_cookie_name, session.token)

        assert client.get("/api/menus").status_code == 401

    def test_invalid_session_token_rejected(self, client: TestClient):
        client.cookies.set(settings.session_cookie_name, "invalid_token_12345")

        assert client.get("/api/menus").status_code == 401

    def test_session_cookie_is_httponly(self, client: TestClient, db: Session):
        create_user(db, username="owner2", password="password123")

        response = client.post("/api/login", json={"username": "owner2", "password": "password123"})

        cookie_header = response.headers["set-cookie"].lower()
        assert "httponly" in cookie_header
        assert "samesite=lax" in cookie_header

    def test_session_cleared_on_logout(self, admin_client: TestClient):
        admin_client.post("/api/logout")

        assert admin_client.get("/api/menus").status_code == 401


@pytest.mark.security
class TestAccessControl:
    @pytest.mark.parametrize("method,path,body", ADMIN_ENDPOINTS)
    def test_anonymous_rejected(self, client: TestClient, method, path, body):
        assert call(client, method, path, body).status_code in (401, 422)

    @pytest.mark.parametrize("method,path,body", ADMIN_ENDPOINTS)
    def test_non_admin_forbidden(self, auth_client: TestClient, method, path, body):
        assert call(auth_client, method, path, body).status_code in (403, 422)

    def test_public_reads_need_no_login(self, client: TestClient):
        for path in ("/api/menu/2024-01-15", "/api/catalog", "/api/custom-items",
                     "/api/generated-images", "/api/announcement"):
            assert client.get(path).status_code == 200


@pytest.mark.security
class TestCSRFProtection:
    """State-changing requests must come from the site itself."""

    @pytest.fixture
    def bare_client(self, db: Session):
        app.dependency_overrides[get_db] = lambda: db
        with TestClient(app) as test_client:
            yield test_client
        app.dependency_overrides.clear()

    def test_post_without_origin_rejected(self, bare_client: TestClient):
        response = bare_client.post("/api/login", json={"username": "a", "password": "b"})

        assert response.status_code == 403
        assert response.json()["detail"] == "Origin validation failed"

    def test_cross_site_origin_rejected(self, bare_client: TestClient):
        response = bare_client.post(
            "/api/contact",
            json={"name": "x", "email": "x@y.z", "message": "hi"},
            headers={"origin": "https://evil.example"},
        )

        assert response.status_code == 403

    def test_origin_takes_precedence_over_referer(self, bare_client: TestClient):
        response = bare_client.post(
            "/api/login",
            json={"username": "a", "password": "b"},
            headers={"origin": "https://evil.example", "referer": "http://testserver/"},
        )

        assert response.status_code == 403

    def test_same_origin_allowed(self, bare_client: TestClient):
        response = bare_client.post(
            "/api/login",
            json={"username": "nobody", "password": "password123"},
            headers={"origin": "http://testserver"},
        )

        assert response.status_code == 401

    def test_safe_methods_are_not_checked(self, bare_client: TestClient):
        assert bare_client.get("/api/catalog").status_code == 200
