"""Document ledger models.

Documents are keyed by ``documentNo``. Field names are camelCase on the wire,
matching what the frontend sends and reads.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentFields(BaseModel):
    """Descriptive fields shared by create and update requests."""

    model_config = _CAMEL

    document_name: str = Field(..., min_length=1)
    document_type: str = Field(..., min_length=1)
    document_size: str  # e.g. "1268 KB"
    document_link: str


class DocumentCreate(DocumentFields):
    """Request model for registering a new document."""

    document_no: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1)  # Becomes the owner


class DocumentUpdate(DocumentFields):
    """Request model for overwriting a document's descriptive fields."""


class DocumentTransfer(BaseModel):
    """Request model for handing a document to a new owner."""

    model_config = _CAMEL

    new_owner: str = Field(..., min_length=1)


class Document(BaseModel):
    """A document as stored in the ledger.

    Seeded documents carry no name or type, so both are optional here.
    """

    model_config = _CAMEL

    document_no: str
    document_name: str | None = None
    document_type: str | None = None
    document_size: str
    document_link: str
    owned_by: str | None = None
    last_modification: datetime

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
