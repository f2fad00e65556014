"""Tests for public-list filtering and ordering."""
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from schemas.suggestion import AuthorSummary, SuggestionDocument
from services.suggestion_filters import SuggestionSort, filter_suggestions

_AUTHOR = AuthorSummary(id=uuid4(), display_name="Ada")
_START = datetime(2024, 1, 1, tzinfo=UTC)
_COURSES = CategoryDocument(id=uuid4(), category_name="Courses")
_OTHER = CategoryDocument(id=uuid4(), category_name="Other")
_COMPLETED = StatusDocument(id=uuid4(), status_name="Completed")


def _suggestion(
    title: str,
    days: int,
    votes: int = 0,
    category: CategoryDocument | None = _COURSES,
    status: StatusDocument | None = None,
    description: str | None = None,
) -> SuggestionDocument:
    return SuggestionDocument(
        id=uuid4(),
        suggestion=title,
        description=description,
        date_created=_START + timedelta(days=days),
        author=_AUTHOR,
        category=category,
        suggestion_status=status,
        user_votes={uuid4() for _ in range(votes)},
        approved_for_release=True,
    )


def test__filter__defaults_sort_newest_first() -> None:
    old = _suggestion("Old", days=0)
    new = _suggestion("New", days=2)
    middle = _suggestion("Middle", days=1)

    result = filter_suggestions([old, new, middle])

    assert [s.suggestion for s in result] == ["New", "Middle", "Old"]


def test__filter__popular_sorts_by_votes_then_date() -> None:
    a = _suggestion("A", days=0, votes=2)
    b = _suggestion("B", days=1, votes=5)
    c = _suggestion("C", days=2, votes=2)

    result = filter_suggestions([a, b, c], sort=SuggestionSort.POPULAR)

    assert [s.suggestion for s in result] == ["B", "C", "A"]


def test__filter__by_category_name() -> None:
    kept = _suggestion("Kept", days=0, category=_COURSES)
    dropped = _suggestion("Dropped", days=1, category=_OTHER)
    uncategorized = _suggestion("None", days=2, category=None)

    result = filter_suggestions([kept, dropped, uncategorized], category="Courses")

    assert result == [kept]


def test__filter__by_status_name() -> None:
    done = _suggestion("Done", days=0, status=_COMPLETED)
    open_ = _suggestion("Open", days=1)

    assert filter_suggestions([done, open_], status="Completed") == [done]


def test__filter__search_is_case_insensitive_on_title_and_description() -> None:
    by_title = _suggestion("Dark MODE please", days=0)
    by_description = _suggestion("Theme", days=1, description="A dark mode toggle")
    unrelated = _suggestion("Faster search", days=2)

    result = filter_suggestions([by_title, by_description, unrelated], search="  dark mode ")

    assert {s.suggestion for s in result} == {"Dark MODE please", "Theme"}


def test__filter__does_not_modify_input() -> None:
    items = [_suggestion("Old", days=0), _suggestion("New", days=1)]
    original = list(items)

    filter_suggestions(items, category="Other")

    assert items == original
