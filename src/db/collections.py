"""Typed collection handles over SQLAlchemy models."""
import logging
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from models.base import Base
from schemas.base import DocumentModel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Base)
DocumentT = TypeVar("DocumentT", bound=DocumentModel)


class Collection(Generic[RecordT, DocumentT]):
    """
    Document-style access to one table.

    Rows go in and out as pydantic documents; every operation runs on the
    session it is given, so several collections can share one transaction.
    """

    def __init__(self, model: type[RecordT], document: type[DocumentT]) -> None:
        self.model = model
        self.document = document

    @property
    def name(self) -> str:
        """Collection (table) name."""
        return self.model.__tablename__

    def _to_document(self, record: RecordT) -> DocumentT:
        return self.document.model_validate(record, from_attributes=True)

    async def find(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        for_update: bool = False,
    ) -> list[DocumentT]:
        """
        Return every document matching all ``criteria`` (all documents if none).

        Args:
            session: Session to run the query on.
            criteria: SQLAlchemy boolean expressions on the model's columns.
            for_update: Lock matched rows until the transaction ends (ignored by
                backends without row locks).
        """
        query = select(self.model).where(*criteria)
        if for_update:
            query = query.with_for_update()
        result = await session.execute(query)
        return [self._to_document(record) for record in result.scalars()]

    async def find_one(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        for_update: bool = False,
    ) -> DocumentT | None:
        """Return the first document matching ``criteria``, or None."""
        query = select(self.model).where(*criteria).limit(1)
        if for_update:
            query = query.with_for_update()
        result = await session.execute(query)
        record = result.scalar_one_or_none()
        return self._to_document(record) if record is not None else None

    async def get(self, session: AsyncSession, document_id: UUID) -> DocumentT | None:
        """Return the document with ``document_id``, or None."""
        return await self.find_one(session, self.model.id == document_id)

    async def insert(self, session: AsyncSession, document: DocumentT) -> DocumentT:
        """
        Insert ``document`` and return it with its storage-assigned id.

        A document that already carries an id keeps it.
        """
        record = self.model(**document.to_record())
        if document.id is not None:
            record.id = document.id
        session.add(record)
        await session.flush()
        logger.debug("collection_insert collection=%s id=%s", self.name, record.id)
        return self._to_document(record)

    async def replace(
        self,
        session: AsyncSession,
        document: DocumentT,
        upsert: bool = False,
    ) -> bool:
        """
        Replace the stored document whose id matches ``document.id``.

        Args:
            session: Session to write on.
            document: Full replacement document.
            upsert: Insert the document when no row matches.

        Returns:
            True if a row was replaced or inserted, False if nothing matched.
        """
        record = None
        if document.id is not None:
            record = await session.get(self.model, document.id)
        if record is None:
            if not upsert:
                return False
            await self.insert(session, document)
            return True

        values: dict[str, Any] = document.to_record()
        for key, value in values.items():
            setattr(record, key, value)
        await session.flush()
        logger.debug("collection_replace collection=%s id=%s", self.name, record.id)
        return True
