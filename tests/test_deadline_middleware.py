"""Tests for the per-request deadline middleware."""

import asyncio

import pytest

from hello_devops.entrypoints.api.middleware.deadline import RequestDeadlineMiddleware


async def receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


async def send(message: dict) -> None:
    pass


def test_slow_request_exceeds_deadline() -> None:
    async def slow_app(scope, receive, send) -> None:
        await asyncio.sleep(5)

    middleware = RequestDeadlineMiddleware(slow_app, timeout=0.01)

    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(middleware({"type": "http", "path": "/slow"}, receive, send))


def test_fast_request_completes() -> None:
    seen = []

    async def fast_app(scope, receive, send) -> None:
        seen.append(scope["path"])

    middleware = RequestDeadlineMiddleware(fast_app, timeout=1.0)
    asyncio.run(middleware({"type": "http", "path": "/fast"}, receive, send))

    assert seen == ["/fast"]


def test_non_http_scopes_are_not_bounded() -> None:
    async def lifespan_app(scope, receive, send) -> None:
        await asyncio.sleep(0.05)

    middleware = RequestDeadlineMiddleware(lifespan_app, timeout=0.001)

    asyncio.run(middleware({"type": "lifespan"}, receive, send))
