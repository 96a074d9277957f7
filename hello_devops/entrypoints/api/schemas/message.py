"""Schemas for the message API."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """The response model for the message endpoint."""

    message: str
    time: str = Field(
        description="The current time formatted per RFC 3339.",
        examples=["2025-09-20T12:34:56+00:00"],
    )
