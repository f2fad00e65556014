"""Base class for documents persisted through a collection handle."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class DocumentModel(BaseModel):
    """
    A storage document.

    Documents are read from ORM rows (``from_attributes``) and written back as
    a flat dict of column values. Embedded models and UUIDs are dumped to their
    JSON form for JSON columns; datetimes stay native for DateTime columns.
    """

    model_config = ConfigDict(from_attributes=True)

    def to_record(self) -> dict[str, Any]:
        """Return column values for this document, excluding ``id``."""
        values = self.model_dump(mode="json", exclude={"id"})
        for name in values:
            native = getattr(self, name)
            if isinstance(native, datetime):
                values[name] = native
        return values
