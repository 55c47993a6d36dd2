"""
mwchain — API Schemas
======================

What:  Pydantic response models for the demo service.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response for GET /health."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Package version")
    middleware: int = Field(description="Number of middleware registered on the service chain")
    uptime_seconds: float = Field(description="Seconds since the service module was loaded")
