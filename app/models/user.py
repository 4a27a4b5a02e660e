"""ORM model for login accounts (public.usuarios)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, Text, true

from app.models.base import Base


class UserAccount(Base):
    """
    Account that may log in to the gateway.

    Column names follow the existing Postgres table; attributes are English.
    username is stored upper-cased; role is free text and only a fixed set
    of values is accepted at login.
    """

    __tablename__ = "usuarios"
    __table_args__ = {"schema": "public"}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column("usuario", Text, nullable=False, unique=True, index=True)
    password_hash = Column(Text, nullable=False)
    role = Column("rol", Text, nullable=False)
    active = Column("activo", Boolean, nullable=False, server_default=true())
    last_login_at = Column("ultimo_login", DateTime(timezone=True), nullable=True)
