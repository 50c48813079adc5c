"""
AI Notes Backend — Document Procedures
======================================

What:  POST /api/actions/{createDocument, updateDocument, deleteDocument,
       listDocuments, getDocumentWithSummaries}
How:   Resolve the caller, let FastAPI validate the body, delegate to
       DocumentService, wrap the row(s) in the response envelope.

Each procedure is a POST with a JSON body and returns 200 with
`{"document": ...}` or `{"documents": [...]}`. Errors are formatted by the
global handlers in main.py.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.auth import CurrentUser, get_current_user
from ainotes.database import get_db_session
from ainotes.schemas.common import ErrorResponse
from ainotes.schemas.document import (
    DocumentCreateInput,
    DocumentEnvelope,
    DocumentIdInput,
    DocumentListEnvelope,
    DocumentRead,
    DocumentUpdateInput,
    DocumentWithSummariesEnvelope,
)
from ainotes.schemas.summary import SummaryRead
from ainotes.services.document_service import document_service

router = APIRouter(prefix="/api/actions", tags=["Documents"])

_ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    401: {"description": "Not signed in", "model": ErrorResponse},
    404: {"description": "Document not found", "model": ErrorResponse},
}


@router.post(
    "/createDocument",
    response_model=DocumentEnvelope,
    responses={k: v for k, v in _ERRORS.items() if k != 404},
    summary="Create a document",
)
async def create_document(
    data: DocumentCreateInput,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> DocumentEnvelope:
    document = await document_service.create_document(db, user.id, data)
    return DocumentEnvelope(document=DocumentRead.model_validate(document))


@router.post(
    "/updateDocument",
    response_model=DocumentEnvelope,
    responses=_ERRORS,
    summary="Partially update a document",
    description=(
        "Only the fields present in the body are written. A body with just "
        "`id` returns the document unchanged without touching `updatedAt`."
    ),
)
async def update_document(
    data: DocumentUpdateInput,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> DocumentEnvelope:
    document = await document_service.update_document(db, user.id, data)
    return DocumentEnvelope(document=DocumentRead.model_validate(document))


@router.post(
    "/deleteDocument",
    response_model=DocumentEnvelope,
    responses=_ERRORS,
    summary="Delete a document",
    description="Summaries and jobs that reference the document are not deleted.",
)
async def delete_document(
    data: DocumentIdInput,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> DocumentEnvelope:
    document = await document_service.delete_document(db, user.id, data.id)
    return DocumentEnvelope(document=DocumentRead.model_validate(document))


@router.post(
    "/listDocuments",
    response_model=DocumentListEnvelope,
    responses={401: _ERRORS[401]},
    summary="List the caller's documents",
)
async def list_documents(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> DocumentListEnvelope:
    documents = await document_service.list_documents(db, user.id)
    return DocumentListEnvelope(
        documents=[DocumentRead.model_validate(d) for d in documents]
    )


@router.post(
    "/getDocumentWithSummaries",
    response_model=DocumentWithSummariesEnvelope,
    responses=_ERRORS,
    summary="Get a document and all of its summaries",
)
async def get_document_with_summaries(
    data: DocumentIdInput,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> DocumentWithSummariesEnvelope:
    document, summaries = await document_service.get_document_with_summaries(
        db, user.id, data.id
    )
    return DocumentWithSummariesEnvelope(
        document=DocumentRead.model_validate(document),
        summaries=[SummaryRead.model_validate(s) for s in summaries],
    )
