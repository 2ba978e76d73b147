"""Tests for the global error handlers."""

from fastapi.testclient import TestClient

from art_catalog_api.app.main import app
from art_catalog_api.app.services.painting_service import PaintingService


def test_unknown_route_uses_message_body(client):
    response = client.get("/api/sculptures")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_validation_error_lists_each_invalid_parameter(client):
    body = client.get("/api/painting/artist/vermeer").json()
    assert body["message"] == "Invalid value for: artist_id"
    assert len(body["details"]) == 1
    assert body["details"][0]["field"] == "path.artist_id"
    assert body["details"][0]["type"] == "int_parsing"


def test_unhandled_exception_returns_500_without_details(monkeypatch):
    async def broken():
        raise RuntimeError("fixture exploded")

    monkeypatch.setattr(PaintingService, "list_paintings", broken)
    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/api/paintings")
    assert response.status_code == 500
    assert response.json() == {"message": "An unexpected error occurred"}
