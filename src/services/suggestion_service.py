"""
Service layer for suggestion operations.

Caching:
- Active (non-archived) suggestions are cached for one minute under a fixed
  key. Any update or vote deletes that key; the next read repopulates it.
- Per-author lists (archived included) are cached for one minute keyed by the
  author's id. Writes do not invalidate them; they self-correct on expiry.
- Approved / pending views are filtered from the active list and share its cache.

Cross-aggregate writes (vote toggle, creation) change a suggestion and a user
in one database transaction: either both documents are updated or neither is.
Both rows are read FOR UPDATE, so concurrent writers touching the same user
(one voter on two suggestions, one author creating twice) queue instead of
overwriting each other's embedded lists.
"""
import logging
from uuid import UUID

from pydantic import TypeAdapter

from core.cache import SUGGESTION_CACHE_NAME, TTL_ONE_MINUTE, Cache, invalidate, read_through
from db.session import DbConnection
from models.suggestion import Suggestion
from models.user import User
from schemas.suggestion import SuggestionDocument
from schemas.user import SuggestionSummary
from services.exceptions import (
    InvalidSuggestionStateError,
    SuggestionNotFoundError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

_suggestion_list = TypeAdapter(list[SuggestionDocument])


class SuggestionService:
    """Cached reads and transactional writes for suggestions."""

    cache_ttl: float = TTL_ONE_MINUTE

    def __init__(self, db: DbConnection, cache: Cache) -> None:
        self._db = db
        self._cache = cache

    # --- Reads ---

    async def get_all_active(self) -> list[SuggestionDocument]:
        """Return all non-archived suggestions (cached for one minute)."""

        async def load() -> list[SuggestionDocument]:
            async with self._db.session() as session:
                return await self._db.suggestions.find(session, Suggestion.archived.is_(False))

        return await read_through(
            self._cache, SUGGESTION_CACHE_NAME, self.cache_ttl, _suggestion_list, load,
        )

    async def get_by_author(self, user_id: UUID) -> list[SuggestionDocument]:
        """
        Return every suggestion authored by ``user_id``, archived ones included.

        Cached for one minute under the user's id.
        """

        async def load() -> list[SuggestionDocument]:
            async with self._db.session() as session:
                return await self._db.suggestions.find(
                    session, Suggestion.author_id == str(user_id),
                )

        return await read_through(
            self._cache, str(user_id), self.cache_ttl, _suggestion_list, load,
        )

    async def get_all_approved(self) -> list[SuggestionDocument]:
        """Return active suggestions approved for release."""
        return [s for s in await self.get_all_active() if s.approved_for_release]

    async def get_pending_approval(self) -> list[SuggestionDocument]:
        """Return active suggestions that are neither approved nor rejected."""
        return [s for s in await self.get_all_active() if s.is_pending]

    async def get_by_id(self, suggestion_id: UUID) -> SuggestionDocument | None:
        """Return the suggestion with ``suggestion_id`` (uncached), or None."""
        async with self._db.session() as session:
            return await self._db.suggestions.get(session, suggestion_id)

    # --- Writes ---

    async def update(self, suggestion: SuggestionDocument) -> None:
        """
        Replace the stored suggestion with ``suggestion`` (matched by id).

        Deletes the active-suggestions cache. Per-author caches are left to expire.

        Raises:
            InvalidSuggestionStateError: If the suggestion is both approved and rejected.
            SuggestionNotFoundError: If no stored suggestion has this id.
        """
        if suggestion.approved_for_release and suggestion.rejected:
            raise InvalidSuggestionStateError(
                "A suggestion cannot be both approved for release and rejected",
            )
        async with self._db.transaction() as session:
            if not await self._db.suggestions.replace(session, suggestion):
                raise SuggestionNotFoundError(suggestion.id)
        logger.info("suggestion_updated id=%s", suggestion.id)
        await invalidate(self._cache, SUGGESTION_CACHE_NAME)

    async def create(self, suggestion: SuggestionDocument) -> SuggestionDocument:
        """
        Store a new suggestion and record it on its author, atomically.

        The suggestion gets a fresh id and starts with no votes. The active
        cache is not invalidated: new suggestions start unapproved, so only the
        pending view can lag, for at most one cache lifetime.

        Raises:
            UserNotFoundError: If the author does not exist. Nothing is stored.
        """
        new_suggestion = suggestion.model_copy(update={"id": None, "user_votes": set()})
        async with self._db.transaction() as session:
            created = await self._db.suggestions.insert(session, new_suggestion)

            author = await self._db.users.find_one(
                session, User.id == created.author.id, for_update=True,
            )
            if author is None:
                raise UserNotFoundError(created.author.id)
            author.authored_suggestions.append(SuggestionSummary.from_suggestion(created))
            await self._db.users.replace(session, author)

        logger.info("suggestion_created id=%s author_id=%s", created.id, created.author.id)
        return created

    async def toggle_vote(self, suggestion_id: UUID, user_id: UUID) -> SuggestionDocument:
        """
        Add ``user_id``'s vote to the suggestion, or remove it if already present.

        The suggestion's voter set and the user's voted-on list change together
        in one transaction, with both rows locked until commit. Self-votes are
        not checked here; callers must reject them before calling.

        Returns:
            The suggestion as committed.

        Raises:
            SuggestionNotFoundError: If the suggestion does not exist.
            UserNotFoundError: If the voting user does not exist.
        """
        async with self._db.transaction() as session:
            suggestion = await self._db.suggestions.find_one(
                session, Suggestion.id == suggestion_id, for_update=True,
            )
            if suggestion is None:
                raise SuggestionNotFoundError(suggestion_id)

            is_upvote = user_id not in suggestion.user_votes
            if is_upvote:
                suggestion.user_votes.add(user_id)
            else:
                suggestion.user_votes.discard(user_id)
            await self._db.suggestions.replace(session, suggestion)

            user = await self._db.users.find_one(session, User.id == user_id, for_update=True)
            if user is None:
                raise UserNotFoundError(user_id)
            remaining = [s for s in user.voted_on_suggestions if s.id != suggestion_id]
            if is_upvote:
                remaining.append(SuggestionSummary.from_suggestion(suggestion))
            user.voted_on_suggestions = remaining
            await self._db.users.replace(session, user)

        logger.info(
            "suggestion_vote_toggled id=%s user_id=%s upvote=%s",
            suggestion_id,
            user_id,
            is_upvote,
        )
        await invalidate(self._cache, SUGGESTION_CACHE_NAME)
        return suggestion
