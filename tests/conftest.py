import pytest
from fastapi.testclient import TestClient
from companion.main import app
from companion.api.deps import get_store, get_alerts
from companion.conversation.store import SessionStore
from companion.services.alerts import AlertLog
from companion.core.config import settings

@pytest.fixture()
def store():
    s = SessionStore()
    yield s
    s.close_all()

@pytest.fixture()
def alerts():
    return AlertLog(limit=50)

@pytest.fixture()
def client(monkeypatch, store, alerts):
    # no simulated thinking in tests
    monkeypatch.setattr(settings, "THINKING_DELAY_MIN_SECONDS", 0.0)
    monkeypatch.setattr(settings, "THINKING_DELAY_MAX_SECONDS", 0.0)
    monkeypatch.setattr(settings, "GREETING_ENABLED", True)
    monkeypatch.setattr(settings, "ALLOW_DEV_DEBUG_META", True)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_alerts] = lambda: alerts
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
