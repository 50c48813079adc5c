"""Create notes_documents, note_summaries and summary_jobs

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the three tables of the notes store.
How:   Integer identity keys, TIMESTAMP WITH TIME ZONE, generic JSON for the
       opaque metadata/input/output columns.

summaries.document_id and jobs.document_id are plain indexed integers, not
database foreign keys: deleting a document leaves its summaries and jobs
behind as orphans.

Rollback: downgrade() drops all three tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "notes_documents",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "owner_id",
            sa.String(255),
            nullable=False,
            comment="Identity-provider id of the owning user",
        ),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "source_type",
            sa.String(32),
            nullable=False,
            server_default=sa.text("'manual'"),
        ),
        sa.Column("source_meta", sa.JSON(), nullable=True),
        sa.Column("tags", sa.Text(), nullable=True, comment="Free-form, e.g. comma-separated"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "source_type IN ('manual', 'upload', 'web', 'other')",
            name="ck_notes_documents_source_type",
        ),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_notes_documents_owner_id", "notes_documents", ["owner_id"])

    op.create_table(
        "note_summaries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("document_id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column(
            "summary_type",
            sa.String(32),
            nullable=False,
            server_default=sa.text("'short'"),
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("original_length", sa.Integer(), nullable=True),
        sa.Column("summary_length", sa.Integer(), nullable=True),
        sa.Column("meta", sa.JSON(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "summary_type IN ('short', 'detailed', 'bullet_points', 'key_points', 'action_items')",
            name="ck_note_summaries_summary_type",
        ),
        sa.CheckConstraint(
            "original_length IS NULL OR original_length >= 0",
            name="ck_note_summaries_original_length",
        ),
        sa.CheckConstraint(
            "summary_length IS NULL OR summary_length >= 0",
            name="ck_note_summaries_summary_length",
        ),
    )
    op.create_index("idx_note_summaries_owner_id", "note_summaries", ["owner_id"])
    op.create_index("idx_note_summaries_document_id", "note_summaries", ["document_id"])

    op.create_table(
        "summary_jobs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("document_id", sa.Integer(), nullable=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column(
            "job_type",
            sa.String(32),
            nullable=False,
            server_default=sa.text("'summary'"),
        ),
        sa.Column("input", sa.JSON(), nullable=True),
        sa.Column("output", sa.JSON(), nullable=True),
        # Rows written by the API always carry an explicit status; this
        # default only applies to direct inserts
        sa.Column(
            "status",
            sa.String(32),
            nullable=False,
            server_default=sa.text("'completed'"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "job_type IN ('summary', 'key_points', 'action_items', 'rewrite', 'other')",
            name="ck_summary_jobs_job_type",
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'completed', 'failed')",
            name="ck_summary_jobs_status",
        ),
    )
    op.create_index("idx_summary_jobs_owner_id", "summary_jobs", ["owner_id"])
    op.create_index("idx_summary_jobs_document_id", "summary_jobs", ["document_id"])


def downgrade() -> None:
    """Drop jobs and summaries before the documents they point at."""
    op.drop_index("idx_summary_jobs_document_id", table_name="summary_jobs")
    op.drop_index("idx_summary_jobs_owner_id", table_name="summary_jobs")
    op.drop_table("summary_jobs")
    op.drop_index("idx_note_summaries_document_id", table_name="note_summaries")
    op.drop_index("idx_note_summaries_owner_id", table_name="note_summaries")
    op.drop_table("note_summaries")
    op.drop_index("idx_notes_documents_owner_id", table_name="notes_documents")
    op.drop_table("notes_documents")
