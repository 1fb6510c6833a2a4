from fastapi.testclient import TestClient

from droppit.config import Settings, get_settings
from droppit.main import app


def test_health_liveness():
    with TestClient(app) as client:
        res = client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "service": "droppit-checkout"}


def test_health_ready_in_memory():
    app.dependency_overrides[get_settings] = lambda: Settings(use_in_memory=True, STRIPE_SECRET_KEY=None)
    try:
        with TestClient(app) as client:
            res = client.get("/health/ready")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ready"
    assert body["checks"] == {"stripe": "not_configured", "database": "healthy"}


def test_health_not_ready_without_stripe_key():
    app.dependency_overrides[get_settings] = lambda: Settings(use_in_memory=False, STRIPE_SECRET_KEY=None)
    try:
        with TestClient(app) as client:
            res = client.get("/health/ready")
    finally:
        app.dependency_overrides.clear()

    assert res.status_code == 503
    assert res.json()["status"] == "not_ready"
