"""Pydantic models for health-related API responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthStatusResponse(BaseModel):
    """API response model for the health API endpoint."""

    status: Literal["healthy"] = Field(
        description="The status of the API.",
        examples=["healthy"],
    )
    timestamp: datetime = Field(
        description="The time the request was handled, as an ISO 8601 string.",
        examples=["2025-09-20T12:34:56.789012Z"],
    )
    version: str = Field(
        description="The version of the running build.",
        examples=["1.0.0"],
    )
