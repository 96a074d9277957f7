"""Request handler interface definitions."""

from typing import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

Handler = Callable[[Request], Awaitable[Response]]
"""A coroutine function producing the full response for a request."""

