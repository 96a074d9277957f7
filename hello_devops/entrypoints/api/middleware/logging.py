"""Request logging middleware."""

import functools
import time

from starlette.requests import Request
from starlette.responses import Response

from hello_devops.core.interfaces.handler import Handler
from hello_devops.setup.logging import get_logger

logger = get_logger(__name__)


def log_requests(handler: Handler) -> Handler:
    """Wrap a handler so every call is logged with its method, path and duration.

    The wrapper awaits ``handler`` once with the incoming request and returns
    its response untouched.
    """

    @functools.wraps(handler)
    async def wrapped(request: Request) -> Response:
        start = time.perf_counter()

        response = await handler(request)

        duration = time.perf_counter() - start
        logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            client=request.client.host if request.client else None,
            duration_ms=round(duration * 1000, 3),
        )
        return response

    return wrapped
