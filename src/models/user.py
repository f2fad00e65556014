"""User model for storing identity records and their suggestion summaries."""
from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, UUIDv7Mixin


class User(Base, UUIDv7Mixin):
    """
    User model - one document per person known to the identity provider.

    The authored/voted lists are embedded JSON arrays of ``{"id", "suggestion"}``
    snapshots. They are replaced as a whole together with the suggestion they
    refer to, inside one transaction.
    """

    __tablename__ = "users"

    object_identifier: Mapped[str | None] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=True,
        comment="Identity provider 'oid' claim - unique identifier from the provider",
    )
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email_address: Mapped[str | None] = mapped_column(String(255), nullable=True)

    authored_suggestions: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list,
    )
    voted_on_suggestions: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list,
    )
