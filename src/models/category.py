"""Category model - tags a suggestion with a product area."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base, UUIDv7Mixin


class Category(Base, UUIDv7Mixin):
    """Category model - append-only list of suggestion categories."""

    __tablename__ = "categories"

    category_name: Mapped[str] = mapped_column(String(100), nullable=False)
    category_description: Mapped[str | None] = mapped_column(Text, nullable=True)
