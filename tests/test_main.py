from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health_check():
    """Health check is accessible without auth or Origin headers."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_openapi_lists_menu_routes():
    paths = client.get("/openapi.json").json()["paths"]
    assert "/api/menu" in paths
    assert "/api/menu/{date}" in paths
    assert "/api/admin/menu/{date}/editable" in paths


def test_unknown_api_route_is_json_404(client: TestClient):
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    assert response.json()["detail"] == "Not Found"


def test_api_401_is_not_redirected(client: TestClient):
    response = client.get("/api/menus", headers={"accept": "text/html"}, follow_redirects=False)
    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


def test_page_401_redirect_keeps_query(client: TestClient):
    response = client.get(
        "/admin?tab=leads", headers={"accept": "text/html"}, follow_redirects=False
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/auth/login?next=/admin?tab=leads"


def test_static_stylesheet_served():
    assert client.get("/static/site.css").status_code == 200
