"""Login authentication: credential lookup, password check, status and role gates."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from app.core.security import verify_password
from app.schemas.auth import AuthenticatedUser
from app.services.user_store import StoreUnavailableError, UserStore

logger = logging.getLogger(__name__)

# Roles allowed to use the gateway; anything else is refused after login.
ALLOWED_ROLES = frozenset({"Director", "CoordProyectos", "Financiera"})


class AuthError(str, Enum):
    """Reasons an authentication attempt fails."""

    MISSING_CREDENTIALS = "missing_credentials"
    INVALID_CREDENTIALS = "invalid_credentials"
    INACTIVE_ACCOUNT = "inactive_account"
    UNAUTHORIZED_ROLE = "unauthorized_role"
    STORE_UNAVAILABLE = "store_unavailable"


class AuthResult(BaseModel):
    """Either user (success) or error (failure) is set, never both."""

    model_config = ConfigDict(frozen=True)

    user: AuthenticatedUser | None = None
    error: AuthError | None = None

    @property
    def ok(self) -> bool:
        return self.user is not None

    @classmethod
    def success(cls, username: str, role: str) -> AuthResult:
        return cls(user=AuthenticatedUser(username=username, role=role))

    @classmethod
    def failure(cls, error: AuthError) -> AuthResult:
        return cls(error=error)


def normalize_username(username: str) -> str:
    """Canonical lookup key: upper-cased and trimmed."""
    return str(username).upper().strip()


class AuthenticationService:
    """
    Validates a username/password pair against the user store.

    Checks run in a fixed order and the first failure is returned:
    lookup, active flag, password, role. A successful login touches the
    account's last-login timestamp; failure of that write is logged and
    does not change the result. Failures are returned, never raised.
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def authenticate(self, username_input: str | None, password_input: str | None) -> AuthResult:
        if not username_input or not password_input:
            return AuthResult.failure(AuthError.MISSING_CREDENTIALS)

        username = normalize_username(username_input)

        try:
            account = self.store.find_user_by_username(username)
        except StoreUnavailableError as e:
            logger.error("User lookup failed: %s", e.cause or e.message)
            return AuthResult.failure(AuthError.STORE_UNAVAILABLE)

        if account is None:
            return AuthResult.failure(AuthError.INVALID_CREDENTIALS)

        if account.active is not True:
            return AuthResult.failure(AuthError.INACTIVE_ACCOUNT)

        stored_hash = str(account.password_hash or "").strip()
        if not verify_password(str(password_input), stored_hash):
            return AuthResult.failure(AuthError.INVALID_CREDENTIALS)

        role = str(account.role or "").strip()
        if role not in ALLOWED_ROLES:
            return AuthResult.failure(AuthError.UNAUTHORIZED_ROLE)

        try:
            self.store.touch_last_login(account.id)
        except StoreUnavailableError as e:
            logger.warning(
                "Last-login update failed; login still accepted",
                extra={"user_id": account.id, "reason": str(e.cause or e.message)[:500]},
            )

        return AuthResult.success(username=account.username, role=role)
