"""
API Module - Black Box Interface

Purpose: HTTP models for the demo session API
Interface: Request and response bodies
Hidden: Validation rules

The API module only describes payloads - session logic lives in the
session and middleware modules.
"""

from .models import HealthResponse, PropertyResponse, SessionSnapshot, SetPropertyRequest

__all__ = [
    "SetPropertyRequest",
    "PropertyResponse",
    "SessionSnapshot",
    "HealthResponse",
]
