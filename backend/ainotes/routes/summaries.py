"""
AI Notes Backend — Summary Procedures
=====================================

What:  POST /api/actions/createSummary and /api/actions/listSummaries.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.auth import CurrentUser, get_current_user
from ainotes.database import get_db_session
from ainotes.schemas.common import ErrorResponse
from ainotes.schemas.summary import (
    SummaryCreateInput,
    SummaryEnvelope,
    SummaryListEnvelope,
    SummaryListInput,
    SummaryRead,
)
from ainotes.services.summary_service import summary_service

router = APIRouter(prefix="/api/actions", tags=["Summaries"])

_ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    401: {"description": "Not signed in", "model": ErrorResponse},
    404: {"description": "Document not found", "model": ErrorResponse},
}


@router.post(
    "/createSummary",
    response_model=SummaryEnvelope,
    responses=_ERRORS,
    summary="Store a summary for one of the caller's documents",
)
async def create_summary(
    data: SummaryCreateInput,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> SummaryEnvelope:
    summary = await summary_service.create_summary(db, user.id, data)
    return SummaryEnvelope(summary=SummaryRead.model_validate(summary))


@router.post(
    "/listSummaries",
    response_model=SummaryListEnvelope,
    responses=_ERRORS,
    summary="List the caller's summaries, optionally for one document",
)
async def list_summaries(
    data: Optional[SummaryListInput] = Body(default=None),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> SummaryListEnvelope:
    document_id = data.document_id if data else None
    summaries = await summary_service.list_summaries(db, user.id, document_id)
    return SummaryListEnvelope(
        summaries=[SummaryRead.model_validate(s) for s in summaries]
    )
