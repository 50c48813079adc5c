"""
AI Notes Backend — Summary Job Procedures
=========================================

What:  POST /api/actions/{createJob, updateJob, listJobs}.
Who:   The frontend logs each model call it makes: createJob before the
       call (status pending), updateJob with the output once it returns.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ainotes.auth import CurrentUser, get_current_user
from ainotes.database import get_db_session
from ainotes.schemas.common import ErrorResponse
from ainotes.schemas.job import (
    JobCreateInput,
    JobEnvelope,
    JobListEnvelope,
    JobListInput,
    JobRead,
    JobUpdateInput,
)
from ainotes.services.job_service import job_service

router = APIRouter(prefix="/api/actions", tags=["Jobs"])

_ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    401: {"description": "Not signed in", "model": ErrorResponse},
    404: {"description": "Job or document not found", "model": ErrorResponse},
}


@router.post(
    "/createJob",
    response_model=JobEnvelope,
    responses=_ERRORS,
    summary="Record a new AI job",
)
async def create_job(
    data: JobCreateInput,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> JobEnvelope:
    job = await job_service.create_job(db, user.id, data)
    return JobEnvelope(job=JobRead.model_validate(job))


@router.post(
    "/updateJob",
    response_model=JobEnvelope,
    responses=_ERRORS,
    summary="Record a job's output and/or status",
)
async def update_job(
    data: JobUpdateInput,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> JobEnvelope:
    job = await job_service.update_job(db, user.id, data)
    return JobEnvelope(job=JobRead.model_validate(job))


@router.post(
    "/listJobs",
    response_model=JobListEnvelope,
    responses=_ERRORS,
    summary="List the caller's jobs, filtered by document and/or status",
)
async def list_jobs(
    data: Optional[JobListInput] = Body(default=None),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> JobListEnvelope:
    filters = data or JobListInput()
    jobs = await job_service.list_jobs(
        db, user.id, document_id=filters.document_id, status=filters.status
    )
    return JobListEnvelope(jobs=[JobRead.model_validate(j) for j in jobs])
