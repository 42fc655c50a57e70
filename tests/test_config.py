from fastapi.testclient import TestClient

from customer_api.config import Settings, get_settings
from customer_api.main import create_app


def test_defaults(monkeypatch):
    for name in ("PORT", "HOST", "ENVIRONMENT", "CORS_ORIGINS", "SEED_DATA"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.PORT == 3000
    assert settings.HOST == "0.0.0.0"
    assert settings.ENVIRONMENT == "development"
    assert settings.CORS_ORIGINS == ["*"]
    assert settings.SEED_DATA is True


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:8501"]')
    settings = Settings(_env_file=None)
    assert settings.PORT == 8080
    assert settings.ENVIRONMENT == "production"
    assert settings.CORS_ORIGINS == ["http://localhost:8501"]


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_unseeded_app_starts_empty():
    app = create_app(Settings(_env_file=None, SEED_DATA=False))
    with TestClient(app) as client:
        assert client.get("/api/customers").json() == {"success": True, "count": 0, "data": []}
        created = client.post("/api/customers", json={"name": "a", "email": "b", "company": "c"})
        assert created.json()["data"]["id"] == 1


def test_restricted_cors_origin():
    app = create_app(Settings(_env_file=None, CORS_ORIGINS=["http://localhost:8501"]))
    with TestClient(app) as client:
        allowed = client.get("/health", headers={"Origin": "http://localhost:8501"})
        assert allowed.headers["access-control-allow-origin"] == "http://localhost:8501"

        blocked = client.get("/health", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in blocked.headers


def test_app_title_from_settings():
    app = create_app(Settings(_env_file=None, APP_NAME="Accounts"))
    with TestClient(app) as client:
        assert client.get("/").json()["message"] == "Accounts is running"
