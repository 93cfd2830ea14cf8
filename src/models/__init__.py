"""Public models for the document backend."""

from src.models.documents import (
    Document,
    DocumentCreate,
    DocumentTransfer,
    DocumentUpdate,
)
from src.models.responses import Response

__all__ = [
    "Document",
    "DocumentCreate",
    "DocumentTransfer",
    "DocumentUpdate",
    "Response",
]
