"""
SessionBox API data models.

These models define the request and response bodies of the demo
session API.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class SetPropertyRequest(BaseModel):
    """Request to add or update a session property."""

    value: Any = Field(..., description="Property value (must be JSON serializable)")


class PropertyResponse(BaseModel):
    """A single session property."""

    key: str = Field(..., description="Property key")
    value: Any = Field(None, description="Property value")


class SessionSnapshot(BaseModel):
    """Current state of the request's session."""

    is_new: bool = Field(..., description="True if the session was created by this request")
    properties: Dict[str, Any] = Field(default_factory=dict, description="Session properties")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "healthy"
    store: str = Field(..., description="Session store backend in use")
