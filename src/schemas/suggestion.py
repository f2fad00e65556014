"""Pydantic schemas for suggestions."""
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from schemas.base import DocumentModel
from schemas.category import CategoryDocument
from schemas.status import StatusDocument

if TYPE_CHECKING:
    from schemas.user import UserDocument


class AuthorSummary(BaseModel):
    """Snapshot of the author embedded in a suggestion."""

    id: UUID
    display_name: str | None = None

    @classmethod
    def from_user(cls, user: "UserDocument") -> "AuthorSummary":
        """Snapshot a stored user."""
        if user.id is None:
            raise ValueError("Cannot reference an unsaved user as author")
        return cls(id=user.id, display_name=user.display_name)


class SuggestionDocument(DocumentModel):
    """
    A feature suggestion.

    ``user_votes`` holds the ids of users who voted for it; a user appears at
    most once. Archived suggestions are hidden from default listings.
    """

    id: UUID | None = None
    suggestion: str
    description: str | None = None
    date_created: datetime = Field(default_factory=lambda: datetime.now(UTC))
    author: AuthorSummary
    category: CategoryDocument | None = None
    suggestion_status: StatusDocument | None = None
    owner_notes: str | None = None
    user_votes: set[UUID] = Field(default_factory=set)
    approved_for_release: bool = False
    archived: bool = False
    rejected: bool = False

    @field_validator("date_created")
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Treat naive timestamps (e.g. read back from SQLite) as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @property
    def vote_count(self) -> int:
        """Number of users who voted for this suggestion."""
        return len(self.user_votes)

    @property
    def is_pending(self) -> bool:
        """Neither approved nor rejected yet."""
        return not self.approved_for_release and not self.rejected

    def to_record(self) -> dict[str, Any]:
        """Return column values, including the indexed author id."""
        values = super().to_record()
        values["author_id"] = str(self.author.id)
        return values


class SuggestionCreate(BaseModel):
    """Schema for submitting a new suggestion."""

    suggestion: str = Field(..., min_length=1, max_length=75)
    description: str | None = Field(default=None, max_length=500)
    category_id: UUID

    @field_validator("suggestion")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Reject whitespace-only titles."""
        v = v.strip()
        if not v:
            raise ValueError("Suggestion must not be blank")
        return v


class SuggestionAdminUpdate(BaseModel):
    """
    Schema for admin triage of a suggestion.

    All fields are optional; only provided fields are changed.
    """

    suggestion: str | None = Field(default=None, min_length=1, max_length=75)
    description: str | None = Field(default=None, max_length=500)
    approved_for_release: bool | None = None
    rejected: bool | None = None
    archived: bool | None = None
    category_id: UUID | None = None
    status_id: UUID | None = None
    clear_status: bool = False
    owner_notes: str | None = Field(default=None, max_length=500)
