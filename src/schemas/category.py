"""Pydantic schemas for categories."""
from uuid import UUID

from pydantic import Field

from schemas.base import DocumentModel


class CategoryDocument(DocumentModel):
    """A suggestion category."""

    id: UUID | None = None
    category_name: str = Field(..., min_length=1, max_length=100)
    category_description: str | None = None
