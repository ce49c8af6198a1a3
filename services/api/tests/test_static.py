"""Tests for the static site served from `public/`."""


def test_root_serves_index_html(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>OPFTS</title>" in response.text


def test_static_asset_served(client) -> None:
    response = client.get("/css/styles.css")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")


def test_custom_static_dir(tmp_path) -> None:
    from fastapi.testclient import TestClient

    from services.api.app.main import create_app
    from services.api.app.settings import Settings

    (tmp_path / "index.html").write_text("<p>custom</p>")
    (tmp_path / "robots.txt").write_text("User-agent: *")

    client = TestClient(create_app(Settings(static_dir=tmp_path)))
    assert client.get("/").text == "<p>custom</p>"
    assert client.get("/robots.txt").text == "User-agent: *"


def test_root_answers_head(client) -> None:
    response = client.head("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
