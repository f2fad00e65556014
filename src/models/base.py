"""SQLAlchemy declarative base with common mixins."""
from uuid import UUID

from sqlalchemy import Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid6 import uuid7


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class UUIDv7Mixin:
    """
    Mixin that adds a UUIDv7 primary key generated at insert time.

    UUIDv7 values are time-ordered, so new rows land at the end of the primary
    key index. Ids are never reused.
    """

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
