"""SQLAlchemy declarative Base shared by the account model and Alembic."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; Alembic autogenerate reads Base.metadata."""
