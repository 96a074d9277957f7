"""API endpoint for health checks."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import Response

from hello_devops.entrypoints.api.middleware.logging import log_requests
from hello_devops.entrypoints.api.responses import render_json
from hello_devops.entrypoints.api.schemas.health import HealthStatusResponse
from hello_devops.settings import ANY_METHOD
from hello_devops.setup.app_info import get_app_info

router = APIRouter(tags=["Metrics"])


async def handle_health(request: Request) -> Response:
    """Returns the health status of the API."""

    return render_json(
        HealthStatusResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=get_app_info(request).version,
        )
    )


router.add_api_route(
    "",
    log_requests(handle_health),
    methods=list(ANY_METHOD),
    summary="API health check.",
    responses={200: {"model": HealthStatusResponse}},
)
