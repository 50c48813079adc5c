"""
AI Notes Backend — Summary Job SQLAlchemy Model
===============================================

What:  ORM model for the `summary_jobs` table, a log of AI operations
       ("generate summary", "extract action items", ...) kept for history
       and transparency.
Why:   The client runs the model call itself and records what it asked for
       (`input`) and what came back (`output`). Nothing in this service
       executes a job; `status` is whatever the client reports.

Mutability:
    Only `output` and `status` change after insert. Jobs are never deleted.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, CheckConstraint, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ainotes.database import Base, UTCDateTime, utcnow

JOB_TYPES = ("summary", "key_points", "action_items", "rewrite", "other")
JOB_STATUSES = ("pending", "completed", "failed")


class SummaryJob(Base):
    """One recorded AI operation, optionally tied to a document."""

    __tablename__ = "summary_jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Same unenforced reference as note_summaries.document_id
    document_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False)

    job_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="summary",
        server_default="summary",
    )

    # Prompt + settings as sent to the model
    input: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    # Raw model response or a parsed version of it
    output: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    # Table default is 'completed' for rows written directly; the createJob
    # procedure always passes an explicit status (default 'pending')
    status: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="completed",
        server_default="completed",
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint(
            "job_type IN ('summary', 'key_points', 'action_items', 'rewrite', 'other')",
            name="ck_summary_jobs_job_type",
        ),
        CheckConstraint(
            "status IN ('pending', 'completed', 'failed')",
            name="ck_summary_jobs_status",
        ),
        Index("idx_summary_jobs_owner_id", "owner_id"),
        Index("idx_summary_jobs_document_id", "document_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<SummaryJob(id={self.id}, job_type='{self.job_type}', "
            f"status='{self.status}')>"
        )
