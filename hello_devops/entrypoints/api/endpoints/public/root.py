"""Landing page served on the root path."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, Response

from hello_devops.core.content.landing_page import LANDING_PAGE_HTML
from hello_devops.entrypoints.api.middleware.logging import log_requests
from hello_devops.settings import ANY_METHOD

router = APIRouter(tags=["Pages"])


async def handle_root(request: Request) -> Response:
    """Returns the static landing page."""

    return HTMLResponse(content=LANDING_PAGE_HTML, status_code=200)


router.add_api_route(
    "/",
    log_requests(handle_root),
    methods=list(ANY_METHOD),
    summary="Landing page.",
    response_class=HTMLResponse,
)
