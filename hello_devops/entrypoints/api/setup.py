"""API setup module."""

import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from hello_devops.settings import (
    API_HOST,
    IDLE_TIMEOUT_SECONDS,
    READ_TIMEOUT_SECONDS,
    WRITE_TIMEOUT_SECONDS,
    AppInfo,
    Settings,
)
from hello_devops.setup.logging import get_logger, setup_logging
from hello_devops.entrypoints.api.endpoints.metrics import health
from hello_devops.entrypoints.api.endpoints.public import message, root
from hello_devops.entrypoints.api.middleware.deadline import RequestDeadlineMiddleware

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(
    app: FastAPI,
):
    """Context manager for the application's lifespan."""
    logger.info("application_started", version=app.state.app_info.version)
    yield
    logger.info("application_stopped")


def create_app(
    settings: Optional[Settings] = None, info: Optional[AppInfo] = None
) -> FastAPI:
    """Creates the FastAPI application.

    Only the three public routes are served, so the generated docs and
    schema routes are switched off.
    """
    fastapi_app = FastAPI(
        title="Hello DevOps API",
        description="Serves a landing page, a health check and a sample JSON message.",
        version=(info or AppInfo()).version,
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    fastapi_app.state.settings = settings or Settings()
    fastapi_app.state.app_info = info or AppInfo()

    fastapi_app.include_router(root.router)
    fastapi_app.include_router(health.router, prefix="/health")
    fastapi_app.include_router(message.router, prefix="/api/message")

    fastapi_app.add_middleware(
        RequestDeadlineMiddleware,
        timeout=READ_TIMEOUT_SECONDS + WRITE_TIMEOUT_SECONDS,
    )
    return fastapi_app


app = create_app()


def entry() -> None:
    """Starts the hello_devops API server."""

    settings = Settings()
    setup_logging(settings)

    logger.info("server_starting", port=settings.port)
    logger.info("server_url", url=f"http://localhost:{settings.port}")

    server = uvicorn.Server(
        uvicorn.Config(
            create_app(settings=settings),
            host=API_HOST,
            port=settings.port,
            loop="uvloop",
            timeout_keep_alive=IDLE_TIMEOUT_SECONDS,
            log_config=None,
        )
    )

    # uvicorn exits on its own when the socket cannot be bound
    try:
        server.run()
    except SystemExit:
        if server.started:
            raise

    if not server.started:
        logger.error("server_start_failed", host=API_HOST, port=settings.port)
        sys.exit(1)


if __name__ == "__main__":
    entry()
