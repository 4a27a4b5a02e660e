"""Pydantic schemas for health check responses."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    ok: bool = Field(description="True when the service can serve logins")
    db: bool = Field(description="Database connectivity status")
