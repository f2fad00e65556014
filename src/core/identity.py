"""
Identity claims supplied by the upstream authenticating proxy.

The proxy validates the login with the identity provider and forwards the
person's claims as request headers. This module maps those claims onto the
stored user record, creating the user on first sight and updating it when the
provider's profile changed since the last visit.
"""
import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from schemas.user import PROFILE_FIELDS, UserDocument
from services.user_service import UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentityClaims:
    """Profile claims for the signed-in person."""

    object_identifier: str
    first_name: str | None = None
    last_name: str | None = None
    display_name: str | None = None
    email_address: str | None = None
    job_title: str | None = None


def apply_claims(user: UserDocument, claims: IdentityClaims) -> bool:
    """
    Copy claim values onto ``user``.

    Returns:
        True if any field changed (the user needs saving).
    """
    is_dirty = False
    for field in PROFILE_FIELDS:
        value = getattr(claims, field)
        if getattr(user, field) != value:
            setattr(user, field, value)
            is_dirty = True
    return is_dirty


async def reconcile_user(users: UserService, claims: IdentityClaims) -> UserDocument:
    """
    Return the stored user for ``claims``, creating or updating it as needed.

    Handles two first requests from the same person racing to create the user:
    the loser hits the unique constraint on ``object_identifier`` and re-reads
    the winner's record.

    A changed profile is written with ``update_profile``, which touches only
    profile fields. The user read here may already be stale, and writing it
    back whole would drop votes or suggestions committed since the read.
    """
    user = await users.get_by_external_id(claims.object_identifier) or UserDocument()
    if not apply_claims(user, claims):
        return user

    if not user.is_saved:
        try:
            return await users.create(user)
        except IntegrityError:
            logger.info(
                "user_create_race object_identifier=%s", claims.object_identifier,
            )
            existing = await users.get_by_external_id(claims.object_identifier)
            if existing is None:
                raise
            return existing

    logger.info("user_profile_refreshed id=%s", user.id)
    return await users.update_profile(user)
