"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthenticatedUser,
    LoginRequest,
    LoginResponse,
    MessageResponse,
)
from app.schemas.health import HealthResponse

__all__ = [
    "AuthenticatedUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
]
