"""
AI Notes Backend — Summary SQLAlchemy Model
===========================================

What:  ORM model for the `note_summaries` table: summaries generated for a
       document. Rows are immutable once inserted.

owner_id duplication:
    owner_id is copied from the caller when the summary is created, after
    the parent document was verified to be the caller's. Listing filters on
    both this column and the caller's document ids.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import (
    JSON,
    CheckConstraint,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from ainotes.database import Base, UTCDateTime, utcnow

SUMMARY_TYPES = ("short", "detailed", "bullet_points", "key_points", "action_items")


class Summary(Base):
    """A summary of one document, in one of the supported summary styles."""

    __tablename__ = "note_summaries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Plain reference to notes_documents.id, not a database foreign key:
    # deleting the document leaves its summaries behind as orphans
    document_id: Mapped[int] = mapped_column(Integer, nullable=False)

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False)

    summary_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="short",
        server_default="short",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Plain text or markdown summary",
    )

    # Characters or tokens; whatever the producer measured
    original_length: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    summary_length: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    meta: Mapped[Optional[Any]] = mapped_column(
        JSON,
        nullable=True,
        comment="Extra structured data, e.g. the bullets or actions as JSON",
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint(
            "summary_type IN ('short', 'detailed', 'bullet_points', 'key_points', 'action_items')",
            name="ck_note_summaries_summary_type",
        ),
        CheckConstraint(
            "original_length IS NULL OR original_length >= 0",
            name="ck_note_summaries_original_length",
        ),
        CheckConstraint(
            "summary_length IS NULL OR summary_length >= 0",
            name="ck_note_summaries_summary_length",
        ),
        Index("idx_note_summaries_owner_id", "owner_id"),
        Index("idx_note_summaries_document_id", "document_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Summary(id={self.id}, document_id={self.document_id}, "
            f"summary_type='{self.summary_type}')>"
        )
