"""Shared exceptions for service layer operations."""
from uuid import UUID


class SuggestionNotFoundError(Exception):
    """Raised when a write targets a suggestion that does not exist."""

    def __init__(self, suggestion_id: UUID | None) -> None:
        self.suggestion_id = suggestion_id
        super().__init__(f"Suggestion not found: {suggestion_id}")


class UserNotFoundError(Exception):
    """
    Raised when a transactional write references a user that does not exist.

    Raised inside the vote/creation transaction, so the whole unit of work is
    rolled back before the caller sees it.
    """

    def __init__(self, user_id: UUID | None) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class InvalidSuggestionStateError(Exception):
    """
    Raised when a suggestion update would leave it in an invalid state.

    A suggestion may be approved, rejected, or neither (pending), never both.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
