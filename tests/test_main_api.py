from fastapi.testclient import TestClient

from config.settings import CopilotSettings, get_copilot_settings
from main import app

client = TestClient(app)


def test_health_reports_demo_mode():
    app.dependency_overrides[get_copilot_settings] = lambda: CopilotSettings(demo_mode=True)
    response = client.get("/health")
    app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "copilot_enabled": True, "demo_mode": True}


def test_routers_are_mounted():
    paths = set(app.openapi()["paths"])
    for path in (
        "/api/v1/personality/code",
        "/api/v1/personality/typed-code",
        "/api/v1/clients/metrics",
        "/api/v1/readings/draw",
        "/api/v1/insights/summary",
        "/api/v1/deck",
    ):
        assert path in paths


def test_full_draw_against_bundled_deck():
    app.dependency_overrides[get_copilot_settings] = lambda: CopilotSettings(enabled=True, demo_mode=True)
    response = client.post("/api/v1/readings/draw", json={"question": "Where is this heading?"})
    app.dependency_overrides.clear()

    assert response.status_code == 200
    body = response.json()
    assert len(body["cards"]) == 3
    assert body["insights"]["keyThemes"][0] == "Swift celebration of justice"


def test_deck_served_through_mounted_router():
    response = client.get("/api/v1/deck")
    assert response.status_code == 200
    assert len(response.json()["cards"]) == 78
