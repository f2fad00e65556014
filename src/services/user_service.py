"""
Service layer for user operations.

Users are never cached. The suggestion service reads and rewrites user
documents inside its vote/creation transactions, so any cached copy would go
stale the moment one of those commits.
"""
import logging
from uuid import UUID

from db.session import DbConnection
from models.user import User
from schemas.user import PROFILE_FIELDS, UserDocument
from services.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Point lookups and writes on the users collection."""

    def __init__(self, db: DbConnection) -> None:
        self._db = db

    async def get_all(self) -> list[UserDocument]:
        """Return all users."""
        async with self._db.session() as session:
            return await self._db.users.find(session)

    async def get_by_id(self, user_id: UUID) -> UserDocument | None:
        """Return the user with ``user_id``, or None."""
        async with self._db.session() as session:
            return await self._db.users.get(session, user_id)

    async def get_by_external_id(self, object_identifier: str) -> UserDocument | None:
        """Return the user linked to an identity-provider id, or None."""
        async with self._db.session() as session:
            return await self._db.users.find_one(
                session, User.object_identifier == object_identifier,
            )

    async def create(self, user: UserDocument) -> UserDocument:
        """Insert ``user`` and return it with its storage-assigned id."""
        async with self._db.transaction() as session:
            created = await self._db.users.insert(session, user)
        logger.info("user_created id=%s", created.id)
        return created

    async def update_profile(self, user: UserDocument) -> UserDocument:
        """
        Copy ``user``'s profile fields onto the stored user with the same id.

        The stored row is re-read under a row lock, so embedded suggestion
        lists written by concurrent votes or creations are kept as stored.

        Returns:
            The stored user after the update.

        Raises:
            UserNotFoundError: If no stored user has this id.
        """
        async with self._db.transaction() as session:
            stored = await self._db.users.find_one(
                session, User.id == user.id, for_update=True,
            )
            if stored is None:
                raise UserNotFoundError(user.id)
            for field in PROFILE_FIELDS:
                setattr(stored, field, getattr(user, field))
            await self._db.users.replace(session, stored)
        logger.info("user_profile_updated id=%s", stored.id)
        return stored

    async def upsert(self, user: UserDocument) -> UserDocument:
        """
        Replace the user matching ``user.id``, inserting it if absent.

        Idempotent by id. An unsaved user (no id) is inserted with a new id.

        Returns:
            The stored user.
        """
        if user.id is None:
            return await self.create(user)
        async with self._db.transaction() as session:
            await self._db.users.replace(session, user, upsert=True)
        logger.debug("user_upserted id=%s", user.id)
        return user
