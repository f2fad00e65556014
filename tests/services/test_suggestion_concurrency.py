"""
Concurrent writers touching the same user.

Each test parks two transactions at an ``asyncio.Barrier`` right after their
suggestion write, so both reach the user read before either commits. Only a
database with row locks and concurrent writers can run this interleaving
(SQLite serializes writers and would block at the barrier), so these run only
when TEST_DATABASE_URL points at PostgreSQL.
"""
import asyncio
import os
from collections.abc import Awaitable, Callable
from typing import Any

import pytest

from db.session import DbConnection
from schemas.category import CategoryDocument
from schemas.suggestion import AuthorSummary, SuggestionDocument
from schemas.user import UserDocument
from services.suggestion_service import SuggestionService
from services.user_service import UserService

pytestmark = pytest.mark.skipif(
    not os.environ.get("TEST_DATABASE_URL", "").startswith("postgresql"),
    reason="requires TEST_DATABASE_URL pointing at PostgreSQL",
)


def _wait_after(
    operation: Callable[..., Awaitable[Any]], barrier: asyncio.Barrier,
) -> Callable[..., Awaitable[Any]]:
    """Run ``operation``, then hold until every party has done the same."""

    async def wrapped(*args: Any, **kwargs: Any) -> Any:
        result = await operation(*args, **kwargs)
        await asyncio.wait_for(barrier.wait(), timeout=10)
        return result

    return wrapped


async def test__toggle_vote__same_voter_on_two_suggestions_keeps_both(
    suggestion_service: SuggestionService,
    user_service: UserService,
    db: DbConnection,
    author: UserDocument,
    voter: UserDocument,
    category: CategoryDocument,
) -> None:
    first = await suggestion_service.create(SuggestionDocument(
        suggestion="First", author=AuthorSummary.from_user(author), category=category,
    ))
    second = await suggestion_service.create(SuggestionDocument(
        suggestion="Second", author=AuthorSummary.from_user(author), category=category,
    ))
    barrier = asyncio.Barrier(2)

    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(db.suggestions, "replace", _wait_after(db.suggestions.replace, barrier))
        await asyncio.gather(
            suggestion_service.toggle_vote(first.id, voter.id),
            suggestion_service.toggle_vote(second.id, voter.id),
        )

    stored_voter = await user_service.get_by_id(voter.id)
    assert {s.id for s in stored_voter.voted_on_suggestions} == {first.id, second.id}
    assert (await suggestion_service.get_by_id(first.id)).user_votes == {voter.id}
    assert (await suggestion_service.get_by_id(second.id)).user_votes == {voter.id}


async def test__create__same_author_twice_keeps_both_summaries(
    suggestion_service: SuggestionService,
    user_service: UserService,
    db: DbConnection,
    author: UserDocument,
    category: CategoryDocument,
) -> None:
    barrier = asyncio.Barrier(2)

    with pytest.MonkeyPatch.context() as mp:
        mp.setattr(db.suggestions, "insert", _wait_after(db.suggestions.insert, barrier))
        created = await asyncio.gather(*(
            suggestion_service.create(SuggestionDocument(
                suggestion=title, author=AuthorSummary.from_user(author), category=category,
            ))
            for title in ("One", "Two")
        ))

    stored_author = await user_service.get_by_id(author.id)
    assert {s.id for s in stored_author.authored_suggestions} == {c.id for c in created}
