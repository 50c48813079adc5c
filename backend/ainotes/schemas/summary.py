"""
AI Notes Backend — Summary Request/Response Schemas
===================================================

Summaries have no update or delete procedure, so there is no partial-update
model here.
"""

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import Field, JsonValue

from ainotes.schemas.common import CamelModel

SummaryType = Literal["short", "detailed", "bullet_points", "key_points", "action_items"]


class SummaryCreateInput(CamelModel):
    """Body of createSummary."""
    document_id: int
    summary_type: SummaryType = Field(default="short")
    content: str = Field(min_length=1, description="Summary text (plain or markdown)")
    original_length: Optional[int] = Field(default=None, ge=0)
    summary_length: Optional[int] = Field(default=None, ge=0)
    meta: Optional[JsonValue] = None


class SummaryListInput(CamelModel):
    """Optional body of listSummaries."""
    document_id: Optional[int] = None


class SummaryRead(CamelModel):
    """A note_summaries row, returned verbatim."""
    id: int
    document_id: int
    owner_id: str
    summary_type: str
    content: str
    original_length: Optional[int] = None
    summary_length: Optional[int] = None
    meta: Optional[Any] = None
    created_at: datetime


class SummaryEnvelope(CamelModel):
    summary: SummaryRead


class SummaryListEnvelope(CamelModel):
    summaries: List[SummaryRead]
