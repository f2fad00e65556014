"""Pydantic schemas for suggestion statuses."""
from uuid import UUID

from pydantic import Field

from schemas.base import DocumentModel


class StatusDocument(DocumentModel):
    """A triage status (e.g. Completed, Watching, Upcoming, Dismissed)."""

    id: UUID | None = None
    status_name: str = Field(..., min_length=1, max_length=100)
    status_description: str | None = None
