"""ASGI middleware bounding how long a single HTTP exchange may take."""

import asyncio

from starlette.types import ASGIApp, Receive, Scope, Send

from hello_devops.setup.logging import get_logger

logger = get_logger(__name__)


class RequestDeadlineMiddleware:
    """Abort HTTP exchanges that run past ``timeout`` seconds."""

    def __init__(self, app: ASGIApp, timeout: float) -> None:
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await asyncio.wait_for(self.app(scope, receive, send), self.timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "request_deadline_exceeded",
                method=scope.get("method"),
                path=scope.get("path"),
                timeout=self.timeout,
            )
            raise
