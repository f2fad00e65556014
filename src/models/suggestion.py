"""Suggestion model for storing submitted feature suggestions."""
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, UUIDv7Mixin


class Suggestion(Base, UUIDv7Mixin):
    """
    Suggestion model - a self-contained document.

    Author, category and status are embedded snapshots (JSON), not foreign
    keys. ``user_votes`` is a JSON array of voter ids with no duplicates.
    """

    __tablename__ = "suggestions"
    __table_args__ = (
        Index("ix_suggestions_archived", "archived"),
    )

    suggestion: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date_created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    author: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    author_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        index=True,
        comment="Copy of author['id'] for indexed per-author lookups",
    )
    category: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    suggestion_status: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    owner_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    user_votes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    approved_for_release: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    archived: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    rejected: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
