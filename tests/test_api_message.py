"""End-to-end tests for the message API."""

from datetime import datetime

from fastapi.testclient import TestClient

from hello_devops.entrypoints.api.setup import create_app
from hello_devops.settings import DEFAULT_MESSAGE, AppInfo


def test_message_endpoint_returns_message_and_time() -> None:
    client = TestClient(create_app())

    response = client.get("/api/message")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    body = response.json()
    assert body["message"] == DEFAULT_MESSAGE
    assert body["time"]

    parsed = datetime.fromisoformat(body["time"])
    assert parsed.tzinfo is not None
    assert parsed.microsecond == 0


def test_message_endpoint_uses_injected_message() -> None:
    client = TestClient(create_app(info=AppInfo(message="Deploy on Friday?")))

    body = client.get("/api/message").json()

    assert body["message"] == "Deploy on Friday?"
