"""End-to-end tests for the landing page."""

from fastapi.testclient import TestClient

from hello_devops.entrypoints.api.setup import create_app


def test_root_serves_landing_page() -> None:
    client = TestClient(create_app())

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"] == "text/html; charset=utf-8"
    for expected in ("Hello DevOps", "/health", "/api/message"):
        assert expected in response.text


def test_root_accepts_any_method() -> None:
    client = TestClient(create_app())

    for method in ("POST", "PUT", "PATCH", "DELETE", "OPTIONS"):
        response = client.request(method, "/")
        assert response.status_code == 200, method
        assert "Hello DevOps" in response.text

    assert client.head("/").status_code == 200
