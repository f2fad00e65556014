"""Filtering and ordering for the public suggestion list."""
from enum import StrEnum

from schemas.suggestion import SuggestionDocument

ALL = "All"


class SuggestionSort(StrEnum):
    """Ordering of the public suggestion list."""

    NEW = "new"
    POPULAR = "popular"


def filter_suggestions(
    suggestions: list[SuggestionDocument],
    category: str = ALL,
    status: str = ALL,
    search: str = "",
    sort: SuggestionSort = SuggestionSort.NEW,
) -> list[SuggestionDocument]:
    """
    Filter and order suggestions for display.

    Args:
        suggestions: Suggestions to filter (typically the approved list).
        category: Category name to keep, or "All".
        status: Status name to keep, or "All".
        search: Case-insensitive text matched against title and description.
        sort: NEW orders by creation time; POPULAR by vote count, then creation time.

    Returns:
        A new list; the input is not modified.
    """
    output = list(suggestions)
    if category != ALL:
        output = [
            s for s in output
            if s.category is not None and s.category.category_name == category
        ]
    if status != ALL:
        output = [
            s for s in output
            if s.suggestion_status is not None and s.suggestion_status.status_name == status
        ]

    needle = search.strip().casefold()
    if needle:
        output = [
            s for s in output
            if needle in s.suggestion.casefold() or needle in (s.description or "").casefold()
        ]

    if sort == SuggestionSort.NEW:
        output.sort(key=lambda s: s.date_created, reverse=True)
    else:
        output.sort(key=lambda s: (s.vote_count, s.date_created), reverse=True)
    return output
