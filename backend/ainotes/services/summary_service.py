"""
AI Notes Backend — Summary Service
==================================

What:  createSummary and listSummaries.
Why:   Summaries hang off a document, so both operations first establish
       which documents the caller may see.

Double ownership check:
    A summary row carries its own owner_id (copied from the caller at
    insert time). listSummaries filters on that column AND on membership
    in the caller's document ids. The two agree by construction; both are
    applied so a row with a drifted owner_id still cannot leak.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.database import utcnow
from ainotes.models.document import Document
from ainotes.models.summary import Summary
from ainotes.schemas.summary import SummaryCreateInput
from ainotes.services.db_errors import translate_db_error
from ainotes.services.ownership import get_owned_or_404, owned_by, owned_document_ids

logger = logging.getLogger(__name__)


class SummaryService:

    async def create_summary(
        self, db: AsyncSession, caller_id: str, data: SummaryCreateInput
    ) -> Summary:
        """
        Insert a summary for a caller-owned document.

        Raises:
            NotFoundError: the document is missing or not the caller's;
                nothing is inserted.
        """
        try:
            await get_owned_or_404(db, Document, data.document_id, caller_id, "document")

            summary = Summary(
                document_id=data.document_id,
                owner_id=caller_id,
                summary_type=data.summary_type,
                content=data.content,
                original_length=data.original_length,
                summary_length=data.summary_length,
                meta=data.meta,
                created_at=utcnow(),
            )
            db.add(summary)
            await db.flush()
        except SQLAlchemyError as e:
            raise translate_db_error(
                e, "creating summary", document_id=data.document_id
            ) from e

        logger.info(
            "Summary %s (%s) created for document %s",
            summary.id,
            summary.summary_type,
            summary.document_id,
        )
        return summary

    async def list_summaries(
        self, db: AsyncSession, caller_id: str, document_id: Optional[int] = None
    ) -> List[Summary]:
        """
        The caller's summaries, optionally for one document.

        Raises:
            NotFoundError: `document_id` is not one of the caller's documents,
                even if it exists for another user.
        """
        try:
            doc_ids = await owned_document_ids(db, caller_id, document_id)
            if not doc_ids:
                return []

            result = await db.execute(
                select(Summary)
                .where(owned_by(Summary, caller_id), Summary.document_id.in_(doc_ids))
                .order_by(Summary.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise translate_db_error(e, "listing summaries") from e


summary_service = SummaryService()
