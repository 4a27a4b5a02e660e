"""Request/response schemas for the login endpoint and the auth service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoginRequest(BaseModel):
    """Credentials for login. Either field may be absent; the service decides."""

    usuario: str | None = Field(default=None, description="Username (any casing)")
    password: str | None = Field(default=None, description="Password")

    @field_validator("usuario", "password", mode="before")
    @classmethod
    def coerce_to_str(cls, v: Any) -> str | None:
        # Numbers and booleans arrive from loosely typed clients.
        # Falsy values (false, 0) count as absent; true is rendered as "true".
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else None
        if isinstance(v, (int, float)):
            if not v:
                return None
            if isinstance(v, float) and v.is_integer():
                return str(int(v))
            return str(v)
        return v


class LoginResponse(BaseModel):
    """Successful login: stored username and trimmed role."""

    usuario: str = Field(..., description="Username as stored")
    rol: str = Field(..., description="Authorized role")


class MessageResponse(BaseModel):
    """Error body returned by every failing route."""

    message: str


class AuthenticatedUser(BaseModel):
    """Outcome of a successful authentication."""

    model_config = ConfigDict(frozen=True)

    username: str
    role: str
