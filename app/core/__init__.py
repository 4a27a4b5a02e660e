"""Core app configuration, database session and password hashing."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.security import hash_password, verify_password

__all__ = ["get_settings", "settings", "get_db", "hash_password", "verify_password"]
