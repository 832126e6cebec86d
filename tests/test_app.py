"""Tests for the application factory and error handling."""

from fastapi.testclient import TestClient

from calorie_tracker.api.app import create_app
from calorie_tracker.containers import AppContainer
from tests.conftest import register


def test_root_and_health(client: TestClient) -> None:
    assert client.get("/").json() == {"message": "Calorie Tracker API is running"}
    assert client.get("/health").json() == {"status": "ok"}


def test_unexpected_error_returns_500(container: AppContainer, monkeypatch) -> None:
    def explode(*_args, **_kwargs):  # type: ignore[no-untyped-def]
        raise RuntimeError("database offline")

    monkeypatch.setattr(container.entry_service, "list_entries", explode)
    client = TestClient(create_app(container), raise_server_exceptions=False)
    headers = register(client)

    response = client.get("/api/calories", headers=headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Server Error"}


def test_unexpected_error_includes_details_locally(
    container: AppContainer, monkeypatch
) -> None:
    def explode(*_args, **_kwargs):  # type: ignore[no-untyped-def]
        raise RuntimeError("database offline")

    monkeypatch.setattr(container.entry_service, "list_entries", explode)
    monkeypatch.setattr(container.settings, "environment", "local")
    client = TestClient(create_app(container), raise_server_exceptions=False)
    headers = register(client)

    response = client.get("/api/calories", headers=headers)

    assert response.json()["error"] == "RuntimeError: database offline"
