"""
Application-level tests: health check, middleware headers and startup seeding.
"""

from fastapi.testclient import TestClient

from app.config import settings, Settings, Environment
from main import app


def test_health_check(client):
    r = client.get("/health-check")

    assert r.status_code == 200
    assert r.json() == {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.app_version,
    }


def test_request_logging_headers(client):
    r = client.get("/shopping-list")

    assert r.headers["X-Request-ID"]
    float(r.headers["X-Process-Time"])


def test_request_ids_differ(client):
    first = client.get("/recipes").headers["X-Request-ID"]
    second = client.get("/recipes").headers["X-Request-ID"]

    assert first != second


def test_restart_resets_collections():
    with TestClient(app) as c:
        c.post("/shopping-list", json={"name": "coffee", "checked": False})
        assert len(c.get("/shopping-list").json()) == 4

    with TestClient(app) as c:
        names = [item["name"] for item in c.get("/shopping-list").json()]
        assert names == ["beans", "tomatoes", "peppers"]


def test_startup_without_seed(monkeypatch):
    monkeypatch.setattr(settings, "seed_on_startup", False)

    with TestClient(app) as c:
        assert c.get("/shopping-list").json() == []
        assert c.get("/recipes").json() == []


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("ENVIRONMENT", "TESTING")
    monkeypatch.setenv("SEED_ON_STARTUP", "false")

    s = Settings()

    assert s.port == 9090
    assert s.environment == Environment.TESTING
    assert s.is_testing()
    assert s.seed_on_startup is False
