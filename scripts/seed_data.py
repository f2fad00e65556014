"""Seed script to populate the local dev database with sample data.

Usage:
    PYTHONPATH=src python scripts/seed_data.py populate
    PYTHONPATH=src python scripts/seed_data.py populate --force
    PYTHONPATH=src python scripts/seed_data.py clear
"""

import argparse
import asyncio
import logging

from core.cache import MemoryCache
from core.config import get_settings
from db.session import DbConnection
from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from schemas.suggestion import AuthorSummary, SuggestionDocument
from schemas.user import UserDocument
from services.category_service import CategoryService
from services.status_service import StatusService
from services.suggestion_service import SuggestionService
from services.user_service import UserService

logger = logging.getLogger(__name__)

CATEGORIES = [
    ('Courses', 'Full paid courses.'),
    ('Dev Questions', 'Advice on being a developer.'),
    ('In-Depth Tutorial', 'A deep-dive video on how to use a topic.'),
    ('10-Minute Training', 'A quick "How do I use this?" video.'),
    ('Other', 'Not sure which category this fits in.'),
]

STATUSES = [
    ('Completed', 'The suggestion was accepted and the corresponding item was created.'),
    ('Watching', 'The suggestion is interesting. We are watching to see how much interest there is in it.'),
    ('Upcoming', 'The suggestion was accepted and it will be released soon.'),
    ('Dismissed', 'The suggestion was not something that we are going to undertake.'),
]

# Dev user object identifier (send as X-Object-Id to act as this user)
DEV_OBJECT_ID = 'dev|local-development-user'

SUGGESTIONS = [
    ('Our First Suggestion', 'This is a suggestion created by the sample data method.', 0, 0, True),
    ('Our Second Suggestion', 'This is a suggestion created by the sample data method.', 1, 1, True),
    ('Our Third Suggestion', 'This is a suggestion created by the sample data method.', 2, 2, True),
    ('Our Fourth Suggestion', 'This is a suggestion created by the sample data method.', 3, 3, True),
    ('Our Fifth Suggestion', 'Still waiting for an admin to look at this one.', 4, None, False),
]


async def populate(db: DbConnection, force: bool) -> None:
    """Create tables and insert sample categories, statuses, a user and suggestions."""
    await db.create_tables()
    cache = MemoryCache()
    categories = CategoryService(db, cache)
    statuses = StatusService(db, cache)
    users = UserService(db)
    suggestions = SuggestionService(db, cache)

    if await categories.get_all() and not force:
        logger.info('Database already has data; use --force to add another sample set')
        return

    created_categories = [
        await categories.create(CategoryDocument(category_name=name, category_description=desc))
        for name, desc in CATEGORIES
    ]
    created_statuses = [
        await statuses.create(StatusDocument(status_name=name, status_description=desc))
        for name, desc in STATUSES
    ]

    user = await users.get_by_external_id(DEV_OBJECT_ID)
    if user is None:
        user = await users.create(UserDocument(
            object_identifier=DEV_OBJECT_ID,
            first_name='Dev',
            last_name='User',
            display_name='Sample Dev User',
            email_address='dev@localhost',
        ))

    for title, description, category_index, status_index, approved in SUGGESTIONS:
        created = await suggestions.create(SuggestionDocument(
            suggestion=title,
            description=description,
            author=AuthorSummary.from_user(user),
            category=created_categories[category_index],
        ))
        if approved:
            created.approved_for_release = True
            created.suggestion_status = (
                created_statuses[status_index] if status_index is not None else None
            )
            await suggestions.update(created)

    logger.info(
        'Seeded %d categories, %d statuses, %d suggestions',
        len(created_categories), len(created_statuses), len(SUGGESTIONS),
    )


async def clear(db: DbConnection) -> None:
    """Drop and recreate all tables."""
    await db.drop_tables()
    await db.create_tables()
    logger.info('Database cleared')


async def run(command: str, force: bool) -> None:
    db = DbConnection.from_settings(get_settings())
    try:
        if command == 'populate':
            await populate(db, force)
        else:
            await clear(db)
    finally:
        await db.dispose()


def main() -> None:
    """Entry point for running the seed script."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    parser = argparse.ArgumentParser(description='Seed the suggestion tracker database.')
    parser.add_argument('command', choices=['populate', 'clear'])
    parser.add_argument('--force', action='store_true', help='Add sample data even if data exists')
    args = parser.parse_args()
    asyncio.run(run(args.command, args.force))


if __name__ == '__main__':
    main()
