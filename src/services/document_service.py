"""Document ledger.

The DocumentService registers, reads, updates, transfers and deletes documents
keyed by their document number. Every write stamps ``last_modification``.

All state is held in-memory and lost on restart. Methods are synchronous and
called from the event loop only, so no locking is needed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from src.middleware.error_handler import ConflictError, NotFoundError
from src.models.documents import Document, DocumentCreate, DocumentUpdate

logger = logging.getLogger(__name__)

# Documents written by init_ledger()
_SEED_DOCUMENTS = (
    {
        "document_no": "671",
        "document_size": "1268 KB",
        "owned_by": "User1",
        "document_link": "https://www.google.com",
    },
    {
        "document_no": "672",
        "document_size": "512 KB",
        "owned_by": "User2",
        "document_link": "https://www.facebook.com",
    },
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DocumentService:
    """In-memory document ledger.

    Parameters
    ----------
    clock:
        Returns the timestamp stamped on writes. Defaults to the current UTC time.
    """

    def __init__(self, *, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _utcnow
        self._documents: dict[str, Document] = {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def exists(self, document_no: str) -> bool:
        return document_no in self._documents

    def get(self, document_no: str) -> Document:
        """Return the document or raise NotFoundError."""
        document = self._documents.get(document_no)
        if document is None:
            raise NotFoundError(f"The asset {document_no} does not exist")
        return document

    def list_all(self) -> list[Document]:
        """All documents, ordered by document number."""
        return [self._documents[key] for key in sorted(self._documents)]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def init_ledger(self) -> list[Document]:
        """Write the seed documents, replacing any with the same number."""
        now = self._clock()
        for seed in _SEED_DOCUMENTS:
            self._documents[seed["document_no"]] = Document(**seed, last_modification=now)
        logger.info("Ledger initialised with %d seed documents", len(_SEED_DOCUMENTS))
        return self.list_all()

    def create(self, request: DocumentCreate) -> Document:
        """Register a new document owned by ``request.user_name``."""
        if self.exists(request.document_no):
            raise ConflictError(f"The asset {request.document_no} already exists")

        document = Document(
            document_no=request.document_no,
            document_name=request.document_name,
            document_type=request.document_type,
            document_size=request.document_size,
            document_link=request.document_link,
            owned_by=request.user_name,
            last_modification=self._clock(),
        )
        self._documents[document.document_no] = document
        logger.info("Document %s created", document.document_no)
        return document

    def update(self, document_no: str, request: DocumentUpdate) -> Document:
        """Overwrite the descriptive fields. Ownership is kept."""
        current = self.get(document_no)
        document = current.model_copy(
            update={
                "document_name": request.document_name,
                "document_type": request.document_type,
                "document_size": request.document_size,
                "document_link": request.document_link,
                "last_modification": self._clock(),
            }
        )
        self._documents[document_no] = document
        logger.info("Document %s updated", document_no)
        return document

    def transfer(self, document_no: str, new_owner: str) -> Document:
        current = self.get(document_no)
        document = current.model_copy(
            update={"owned_by": new_owner, "last_modification": self._clock()}
        )
        self._documents[document_no] = document
        logger.info("Document %s transferred to %s", document_no, new_owner)
        return document

    def delete(self, document_no: str) -> None:
        self.get(document_no)
        del self._documents[document_no]
        logger.info("Document %s deleted", document_no)
