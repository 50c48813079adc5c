"""
AI Notes Backend — Document Service
===================================

What:  Business logic for the document procedures: create, partial update,
       delete, list, and fetch-with-summaries.
How:   Each method takes the request's session and the caller id, performs
       one ownership-scoped lookup where needed, then one write.
Who:   Called by the route handlers in routes/documents.py.

Error Handling Strategy:
    NotFoundError propagates untouched. SQLAlchemy errors go through
    translate_db_error (DatabaseError, or ConflictError on integrity
    violations), so an unreachable database is never reported as
    "not found".

Design Decision:
    DocumentService is stateless; a module-level singleton is shared by
    all requests.
"""

import logging
from typing import List, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.database import utcnow
from ainotes.models.document import Document
from ainotes.models.summary import Summary
from ainotes.schemas.document import DocumentCreateInput, DocumentUpdateInput
from ainotes.services.db_errors import translate_db_error
from ainotes.services.ownership import get_owned_or_404, owned_by

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Responsibilities:
        - create_document(): insert stamped with owner and timestamps
        - update_document(): merge supplied fields; no-op when none supplied
        - delete_document(): scoped delete returning the removed row
        - list_documents(): all of the caller's documents
        - get_document_with_summaries(): document plus its summaries
    """

    async def create_document(
        self, db: AsyncSession, caller_id: str, data: DocumentCreateInput
    ) -> Document:
        now = utcnow()
        document = Document(
            owner_id=caller_id,
            title=data.title,
            content=data.content,
            source_type=data.source_type,
            source_meta=data.source_meta,
            tags=data.tags,
            created_at=now,
            updated_at=now,
        )
        try:
            db.add(document)
            await db.flush()
        except SQLAlchemyError as e:
            raise translate_db_error(e, "creating document") from e
        logger.info("Document %s created for caller %s", document.id, caller_id)
        return document

    async def update_document(
        self, db: AsyncSession, caller_id: str, data: DocumentUpdateInput
    ) -> Document:
        """
        Partial update of a caller-owned document.

        Steps:
            1. Scoped lookup (NotFoundError if absent or not owned)
            2. No supplied fields → return the row as-is, updated_at untouched
            3. Otherwise assign only the supplied fields and bump updated_at
        """
        changes = data.changes()
        try:
            document = await get_owned_or_404(db, Document, data.id, caller_id, "document")
            if not changes:
                return document

            for field, value in changes.items():
                setattr(document, field, value)
            document.updated_at = utcnow()
            await db.flush()
        except SQLAlchemyError as e:
            raise translate_db_error(e, "updating document", document_id=data.id) from e

        logger.info("Document %s updated (%s)", document.id, ", ".join(sorted(changes)))
        return document

    async def delete_document(
        self, db: AsyncSession, caller_id: str, document_id: int
    ) -> Document:
        """
        Delete a caller-owned document and return the row as it was.

        Summaries and jobs referencing it are left in place as orphans; the
        list procedures stop returning them because they filter on the
        caller's current document ids.
        """
        try:
            document = await get_owned_or_404(db, Document, document_id, caller_id, "document")
            await db.delete(document)
            await db.flush()
        except SQLAlchemyError as e:
            raise translate_db_error(e, "deleting document", document_id=document_id) from e

        logger.info("Document %s deleted by caller %s", document_id, caller_id)
        return document

    async def list_documents(self, db: AsyncSession, caller_id: str) -> List[Document]:
        try:
            result = await db.execute(
                select(Document).where(owned_by(Document, caller_id)).order_by(Document.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise translate_db_error(e, "listing documents") from e

    async def get_document_with_summaries(
        self, db: AsyncSession, caller_id: str, document_id: int
    ) -> Tuple[Document, List[Summary]]:
        """
        The caller's document and every summary attached to it.

        Summaries are selected by document id alone: the document lookup
        already proved ownership, and a summary's owner always matches its
        document's owner.
        """
        try:
            document = await get_owned_or_404(db, Document, document_id, caller_id, "document")
            result = await db.execute(
                select(Summary).where(Summary.document_id == document_id).order_by(Summary.id)
            )
            return document, list(result.scalars().all())
        except SQLAlchemyError as e:
            raise translate_db_error(e, "loading document", document_id=document_id) from e


document_service = DocumentService()
