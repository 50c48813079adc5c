"""
AI Notes Backend — Summary Job Service
======================================

What:  createJob, updateJob and listJobs for the AI job log.
Why:   Jobs record what the client asked a model to do and what came back.
       This service only stores them; it never runs anything.

listJobs filter composition:
    owner_id = caller
    AND (document_id IS NULL OR document_id IN <caller's document ids>)
    AND (status = :status, when given)

    Jobs not tied to a document stay in the result even when the caller
    narrows by documentId; the documentId filter only narrows which
    document-bound jobs are visible.
"""

import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.database import utcnow
from ainotes.models.document import Document
from ainotes.models.job import SummaryJob
from ainotes.schemas.job import JobCreateInput, JobUpdateInput
from ainotes.services.db_errors import translate_db_error
from ainotes.services.ownership import get_owned_or_404, owned_by, owned_document_ids

logger = logging.getLogger(__name__)


class JobService:
    """
    Responsibilities:
        - create_job(): verify the optional document, insert with owner
        - update_job(): change output/status only; no-op when neither given
        - list_jobs(): document-set and status filtering
    """

    async def create_job(
        self, db: AsyncSession, caller_id: str, data: JobCreateInput
    ) -> SummaryJob:
        try:
            if data.document_id is not None:
                await get_owned_or_404(db, Document, data.document_id, caller_id, "document")

            job = SummaryJob(
                document_id=data.document_id,
                owner_id=caller_id,
                job_type=data.job_type,
                input=data.input,
                output=data.output,
                status=data.status,
                created_at=utcnow(),
            )
            db.add(job)
            await db.flush()
        except SQLAlchemyError as e:
            raise translate_db_error(e, "creating job", document_id=data.document_id) from e

        logger.info("Job %s (%s, %s) created", job.id, job.job_type, job.status)
        return job

    async def update_job(
        self, db: AsyncSession, caller_id: str, data: JobUpdateInput
    ) -> SummaryJob:
        """
        Record a job's result.

        Only `output` and `status` are writable. Jobs have no updated_at, so
        the no-op path and the write path differ only in whether a flush
        happens.
        """
        changes = data.changes()
        try:
            job = await get_owned_or_404(db, SummaryJob, data.id, caller_id, "job")
            if not changes:
                return job

            for field, value in changes.items():
                setattr(job, field, value)
            await db.flush()
        except SQLAlchemyError as e:
            raise translate_db_error(e, "updating job", job_id=data.id) from e

        logger.info("Job %s updated (status=%s)", job.id, job.status)
        return job

    async def list_jobs(
        self,
        db: AsyncSession,
        caller_id: str,
        document_id: Optional[int] = None,
        status: Optional[str] = None,
    ) -> List[SummaryJob]:
        """
        Raises:
            NotFoundError: `document_id` is not one of the caller's documents.
        """
        try:
            doc_ids = await owned_document_ids(db, caller_id, document_id)

            query = select(SummaryJob).where(
                owned_by(SummaryJob, caller_id),
                or_(SummaryJob.document_id.is_(None), SummaryJob.document_id.in_(doc_ids)),
            )
            if status is not None:
                query = query.where(SummaryJob.status == status)

            result = await db.execute(query.order_by(SummaryJob.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise translate_db_error(e, "listing jobs") from e


job_service = JobService()
