"""Pydantic schemas for users and their embedded suggestion summaries."""
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, Field

from schemas.base import DocumentModel

if TYPE_CHECKING:
    from schemas.suggestion import SuggestionDocument


class SuggestionSummary(BaseModel):
    """
    Snapshot of a suggestion's id and title, embedded in a user document.

    Taken when the user authors or votes on the suggestion. Later edits to the
    suggestion are not reflected here.
    """

    id: UUID
    suggestion: str

    @classmethod
    def from_suggestion(cls, suggestion: "SuggestionDocument") -> "SuggestionSummary":
        """Snapshot a stored suggestion."""
        if suggestion.id is None:
            raise ValueError("Cannot summarize an unsaved suggestion")
        return cls(id=suggestion.id, suggestion=suggestion.suggestion)


# Fields sourced from identity claims; the embedded suggestion lists are not among them
PROFILE_FIELDS = ("object_identifier", "first_name", "last_name", "display_name", "email_address")


class UserDocument(DocumentModel):
    """
    A user identity record.

    ``id`` is None until the user is first stored. ``object_identifier`` is the
    identity provider's id for the person.
    """

    id: UUID | None = None
    object_identifier: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    email_address: str | None = None
    authored_suggestions: list[SuggestionSummary] = Field(default_factory=list)
    voted_on_suggestions: list[SuggestionSummary] = Field(default_factory=list)

    @property
    def is_saved(self) -> bool:
        """Whether storage has assigned this user an id."""
        return self.id is not None
