"""
Pydantic Schemas for API - JSON response models for OpenAPI.

The game pages themselves are HTML; only system endpoints return JSON.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(description="Service status")
    service: str = Field(description="Service name")
    version: str = Field(description="Service version")
