"""
AI Notes Backend — Document Request/Response Schemas
====================================================

What:  Input contracts for the document procedures and the row/envelope
       models they return.
How:   FastAPI validates request bodies against the *Input models before
       the handler runs; failures become 400 `validation_error` responses.

Partial updates:
    DocumentUpdateInput keeps pydantic's record of which fields the client
    actually sent (`model_fields_set`). `changes()` returns only those, so an
    omitted field is never overwritten and an empty update is detectable.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, JsonValue, field_validator

from ainotes.schemas.common import CamelModel, reject_null
from ainotes.schemas.summary import SummaryRead

SourceType = Literal["manual", "upload", "web", "other"]


# ══════════════════════════════════════════════════════════════════════════
# Input Models
# ══════════════════════════════════════════════════════════════════════════


class DocumentCreateInput(CamelModel):
    """Body of createDocument."""
    title: str = Field(min_length=1, description="Document title")
    content: str = Field(min_length=1, description="Full raw text of the note")
    source_type: SourceType = Field(default="manual")
    source_meta: Optional[JsonValue] = Field(
        default=None,
        description="Opaque metadata: file name, URL, mime type, ...",
    )
    tags: Optional[str] = Field(default=None, description="Free-text tags")


class DocumentUpdateInput(CamelModel):
    """Body of updateDocument. Every field except `id` is optional."""
    id: int
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    source_type: Optional[SourceType] = None
    # Explicit null clears the metadata
    source_meta: Optional[JsonValue] = None
    tags: Optional[str] = None

    @field_validator("title", "content", "source_type", "tags")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    def changes(self) -> Dict[str, Any]:
        """Fields the client supplied, minus `id`, keyed by column name."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }


class DocumentIdInput(CamelModel):
    """Body of deleteDocument and getDocumentWithSummaries."""
    id: int


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class DocumentRead(CamelModel):
    """A notes_documents row, returned verbatim."""
    id: int
    owner_id: str
    title: str
    content: str
    source_type: str
    source_meta: Optional[Any] = None
    tags: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class DocumentEnvelope(CamelModel):
    document: DocumentRead


class DocumentListEnvelope(CamelModel):
    documents: List[DocumentRead]


class DocumentWithSummariesEnvelope(CamelModel):
    document: DocumentRead
    summaries: List[SummaryRead]
