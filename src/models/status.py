"""Status model - triage state assigned to a suggestion by admins."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, UUIDv7Mixin


class Status(Base, UUIDv7Mixin):
    """Status model - append-only list of suggestion statuses."""

    __tablename__ = "statuses"

    status_name: Mapped[str] = mapped_column(String(100), nullable=False)
    status_description: Mapped[str | None] = mapped_column(Text, nullable=True)
