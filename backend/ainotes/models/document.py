"""
AI Notes Backend — Document SQLAlchemy Model
============================================

What:  ORM model for the `notes_documents` table: long notes or documents
       supplied by a user (meeting notes, lecture notes, articles, ...).
Who:   Used by DocumentService for CRUD and by SummaryService/JobService to
       verify that a referenced document belongs to the caller.

Table Design Rationale:
    - Integer auto-increment id: documents are addressed by small numeric ids
    - owner_id: opaque text id from the identity provider (JWT `sub`)
    - source_type: enumerated text guarded by a CHECK constraint
    - source_meta: opaque JSON (file name, URL, mime type, ...)
    - tags: free text, not parsed
    - created_at / updated_at: UTC; updated_at only moves on a real change

    Index on owner_id:
        Every query on this table is filtered by owner.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, CheckConstraint, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from ainotes.database import Base, UTCDateTime, utcnow

SOURCE_TYPES = ("manual", "upload", "web", "other")


class Document(Base):
    """
    A note or document owned by one user.

    Lifecycle:
        1. Created by the owner with a title and content
        2. Partially updated by the owner (updated_at refreshed)
        3. Deleted by the owner; summaries and jobs are not cascaded
    """

    __tablename__ = "notes_documents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    owner_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Caller id from the identity provider",
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Full raw text of the note or document",
    )

    source_type: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        default="manual",
        server_default="manual",
        comment="Where the document came from: manual, upload, web, other",
    )

    source_meta: Mapped[Optional[Any]] = mapped_column(
        JSON,
        nullable=True,
        comment="Opaque metadata: file name, URL, mime type, etc.",
    )

    tags: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint(
            "source_type IN ('manual', 'upload', 'web', 'other')",
            name="ck_notes_documents_source_type",
        ),
        Index("idx_notes_documents_owner_id", "owner_id"),
        # Ids are never reused, so orphaned summaries and jobs cannot
        # attach to a newer document
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Document(id={self.id}, owner_id='{self.owner_id}', "
            f"source_type='{self.source_type}')>"
        )
