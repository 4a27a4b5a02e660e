"""Data access for login accounts: lookup by username and last-login touch."""

from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import UserAccount

logger = logging.getLogger(__name__)


class StoreUnavailableError(Exception):
    """Raised when the user store cannot be queried or updated."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class UserStore(Protocol):
    """What the authentication flow needs from persistence."""

    def find_user_by_username(self, normalized_username: str) -> UserAccount | None: ...

    def touch_last_login(self, user_id: int) -> None: ...


class SqlAlchemyUserStore:
    """UserStore backed by a SQLAlchemy session (one per request)."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_user_by_username(self, normalized_username: str) -> UserAccount | None:
        """Exact match on the stored (upper-cased) username; at most one row."""
        try:
            return (
                self.session.query(UserAccount)
                .filter(UserAccount.username == normalized_username)
                .first()
            )
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreUnavailableError("User lookup failed.", cause=e) from e

    def touch_last_login(self, user_id: int) -> None:
        """Set last_login_at to the database's now() for one account and commit."""
        try:
            updated = (
                self.session.query(UserAccount)
                .filter(UserAccount.id == user_id)
                .update(
                    {UserAccount.last_login_at: func.now()},
                    synchronize_session=False,
                )
            )
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreUnavailableError("Last-login update failed.", cause=e) from e
        if updated == 0:
            logger.warning("Last-login update matched no rows", extra={"user_id": user_id})
