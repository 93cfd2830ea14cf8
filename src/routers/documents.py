"""Document ledger endpoints.

- GET    /api/v1/documents — list all documents
- POST   /api/v1/documents — register a document (409 if it exists)
- POST   /api/v1/documents/init — write the seed documents
- GET    /api/v1/documents/{document_no} — read one document
- GET    /api/v1/documents/{document_no}/exists — existence check
- PUT    /api/v1/documents/{document_no} — overwrite descriptive fields
- POST   /api/v1/documents/{document_no}/transfer — change owner
- DELETE /api/v1/documents/{document_no} — delete; payload is the remaining list
"""

from __future__ import annotations

from fastapi import APIRouter

from src.models.documents import Document, DocumentCreate, DocumentTransfer, DocumentUpdate
from src.models.responses import Response
from src.services.document_service import DocumentService


def _as_wire(documents: list[Document]) -> list[dict]:
    return [document.to_wire() for document in documents]


def create_documents_router(*, document_service: DocumentService) -> APIRouter:
    """Factory that creates the documents router with injected dependencies."""

    documents_router = APIRouter(prefix="/api/v1/documents", tags=["documents"])

    @documents_router.get("")
    async def list_documents() -> dict:
        return Response.ok(
            "Documents retrieved", _as_wire(document_service.list_all())
        ).to_wire()

    @documents_router.post("", status_code=201)
    async def create_document(body: DocumentCreate) -> dict:
        document = document_service.create(body)
        return Response.ok("Document created", document.to_wire()).to_wire()

    @documents_router.post("/init")
    async def init_ledger() -> dict:
        """Write the seed documents, replacing any with the same number."""
        return Response.ok(
            "Ledger initialised", _as_wire(document_service.init_ledger())
        ).to_wire()

    @documents_router.get("/{document_no}")
    async def read_document(document_no: str) -> dict:
        document = document_service.get(document_no)
        return Response.ok("Document retrieved", document.to_wire()).to_wire()

    @documents_router.get("/{document_no}/exists")
    async def document_exists(document_no: str) -> dict:
        exists = document_service.exists(document_no)
        return Response.ok(None, {"exists": exists}).to_wire()

    @documents_router.put("/{document_no}")
    async def update_document(document_no: str, body: DocumentUpdate) -> dict:
        document = document_service.update(document_no, body)
        return Response.ok("Document updated", document.to_wire()).to_wire()

    @documents_router.post("/{document_no}/transfer")
    async def transfer_document(document_no: str, body: DocumentTransfer) -> dict:
        document = document_service.transfer(document_no, body.new_owner)
        return Response.ok("Document transferred", document.to_wire()).to_wire()

    @documents_router.delete("/{document_no}")
    async def delete_document(document_no: str) -> dict:
        """Delete a document and return the documents that remain."""
        document_service.delete(document_no)
        return Response.ok(
            "Document deleted", _as_wire(document_service.list_all())
        ).to_wire()

    return documents_router
