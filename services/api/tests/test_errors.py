"""Tests for the JSON 404/500 error responses."""

from services.api.app import catalog


def test_unknown_route_returns_404(client) -> None:
    response = client.get("/no-such-route")
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found", "path": "/no-such-route"}


def test_unknown_api_route_reports_path_without_query(client) -> None:
    response = client.get("/api/nothing?x=1")
    assert response.status_code == 404
    assert response.json()["path"] == "/api/nothing"


def test_missing_static_asset_returns_404(client) -> None:
    response = client.get("/images/missing.png")
    assert response.status_code == 404
    assert response.json()["error"] == "Route not found"


def test_handler_fault_returns_500(client, monkeypatch) -> None:
    def boom():
        raise RuntimeError("catalog unavailable")

    monkeypatch.setattr(catalog, "get_projects", boom)

    response = client.get("/api/projects")
    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong!", "message": "catalog unavailable"}


def test_handler_fault_is_logged(client, monkeypatch, caplog) -> None:
    def boom():
        raise ValueError("bad team")

    monkeypatch.setattr(catalog, "get_team", boom)

    with caplog.at_level("ERROR", logger="services.api.app.errors"):
        client.get("/api/team")

    assert any("Unhandled error on GET /api/team" in r.getMessage() for r in caplog.records)


def test_unmatched_method_on_unknown_path_returns_404(client) -> None:
    response = client.post("/no-such-route", json={"x": 1})
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found", "path": "/no-such-route"}


def test_unmatched_method_on_known_path_returns_404(client) -> None:
    for method, path in (("POST", "/api/projects"), ("PUT", "/api/team"), ("DELETE", "/health")):
        response = client.request(method, path)
        assert response.status_code == 404, (method, path)
        assert response.json() == {"error": "Route not found", "path": path}


def test_500_is_answered_outside_header_middleware(client, monkeypatch) -> None:
    def boom():
        raise RuntimeError("down")

    monkeypatch.setattr(catalog, "get_team", boom)

    response = client.get("/api/team", headers={"Origin": "https://example.org"})
    assert response.status_code == 500
    assert "x-content-type-options" not in response.headers
    assert "access-control-allow-origin" not in response.headers
