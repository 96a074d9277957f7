"""Message endpoint returning a fixed greeting and the current time."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import Response

from hello_devops.entrypoints.api.middleware.logging import log_requests
from hello_devops.entrypoints.api.responses import render_json
from hello_devops.entrypoints.api.schemas.message import MessageResponse
from hello_devops.settings import ANY_METHOD
from hello_devops.setup.app_info import get_app_info

router = APIRouter(tags=["Message"])


def rfc3339_now() -> str:
    """Current local time as an RFC 3339 string with second precision."""
    return datetime.now(timezone.utc).astimezone().isoformat(timespec="seconds")


async def handle_message(request: Request) -> Response:
    """Returns the configured message and the current time."""

    return render_json(
        MessageResponse(message=get_app_info(request).message, time=rfc3339_now())
    )


router.add_api_route(
    "",
    log_requests(handle_message),
    methods=list(ANY_METHOD),
    summary="Sample JSON message.",
    responses={200: {"model": MessageResponse}},
)
