"""JSON response rendering shared by the API endpoints."""

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError
from starlette.responses import Response

from hello_devops.setup.logging import get_logger

logger = get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"


def render_json(payload: BaseModel) -> Response:
    """Render ``payload`` as a 200 JSON response.

    The body is serialized before the response exists, so a failure never
    leaves a half-written document on the wire. A payload that cannot be
    serialized is logged and answered with a 200 and an empty body.
    """
    try:
        body = payload.model_dump_json()
    except PydanticSerializationError:
        logger.exception(
            "response_encoding_failed", schema=type(payload).__name__
        )
        body = ""

    return Response(content=body, status_code=200, media_type=JSON_MEDIA_TYPE)
