"""
AI Notes Backend — Summary Job Request/Response Schemas
=======================================================

What:  Contracts for createJob, updateJob and listJobs.

Update semantics:
    Only `output` and `status` may change. As with documents, the set of
    fields the client sent decides what is written; `output: null` clears
    the stored output, while `status: null` is rejected.
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field, JsonValue, field_validator

from ainotes.schemas.common import CamelModel, reject_null

JobType = Literal["summary", "key_points", "action_items", "rewrite", "other"]
JobStatus = Literal["pending", "completed", "failed"]


class JobCreateInput(CamelModel):
    """Body of createJob."""
    document_id: Optional[int] = None
    job_type: JobType = Field(default="summary")
    input: Optional[JsonValue] = Field(default=None, description="Prompt and settings")
    output: Optional[JsonValue] = Field(default=None, description="Model response")
    status: JobStatus = Field(default="pending")


class JobUpdateInput(CamelModel):
    """Body of updateJob."""
    id: int
    output: Optional[JsonValue] = None
    status: Optional[JobStatus] = None

    @field_validator("status")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    def changes(self) -> Dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name in ("output", "status")
        }


class JobListInput(CamelModel):
    """Optional body of listJobs."""
    document_id: Optional[int] = None
    status: Optional[JobStatus] = None


class JobRead(CamelModel):
    """A summary_jobs row, returned verbatim."""
    id: int
    document_id: Optional[int] = None
    owner_id: str
    job_type: str
    input: Optional[Any] = None
    output: Optional[Any] = None
    status: str
    created_at: datetime


class JobEnvelope(CamelModel):
    job: JobRead


class JobListEnvelope(CamelModel):
    jobs: List[JobRead]
