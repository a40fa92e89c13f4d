"""
API endpoints for job applications.

Submission lives at POST /apply; everything else under /applications. All
rules (reference checks, one application per candidate and job, valid
statuses) are enforced by the lifecycle manager; these handlers only shape
responses.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query

from jobboard.core.deps import get_application_manager
from jobboard.schemas.application import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationStats,
    ApplicationStatusUpdateRequest,
    CandidateApplicationsResponse,
)
from jobboard.schemas.common import ItemResponse, ListResponse
from jobboard.services.applications import ApplicationLifecycleManager
from jobboard.services.formatting import candidate_ref, format_application

router = APIRouter(tags=["Applications"])
logger = logging.getLogger(__name__)


def _applications_list(applications, message: str) -> ListResponse[ApplicationResponse]:
    return ListResponse(
        message=message,
        count=len(applications),
        data=[format_application(a) for a in applications],
    )


@router.post("/apply", status_code=201, response_model=ItemResponse[ApplicationResponse])
def apply_for_job(
    request: ApplicationCreateRequest,
    manager: ApplicationLifecycleManager = Depends(get_application_manager)
):
    """
    Submit a job application.

    Flow:
    1. jobId, candidateId and resumeId must all be present and well-formed
    2. Job, candidate and resume must exist (checked in that order)
    3. The resume must belong to the candidate
    4. The candidate must not have applied for this job before
    5. Application saved with status=applied

    Raises:
        400: Missing or malformed id, or resume owned by someone else
        404: Referenced job, candidate or resume not found
        409: Duplicate application (body carries existingApplicationId)
    """
    application = manager.create(request.job_id, request.candidate_id, request.resume_id)
    return ItemResponse(message="Application submitted successfully", data=format_application(application))


@router.get("/applications", response_model=ListResponse[ApplicationResponse])
def list_applications(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    status: Optional[str] = None,
    manager: ApplicationLifecycleManager = Depends(get_application_manager)
):
    """
    List applications, most recently applied first.

    Args:
        status: Optional filter (applied, shortlisted, rejected)
    """
    applications = manager.list_all(skip=skip, limit=limit, status=status)
    return _applications_list(applications, f"Found {len(applications)} applications")


@router.get("/applications/stats", response_model=ItemResponse[ApplicationStats])
def application_stats(manager: ApplicationLifecycleManager = Depends(get_application_manager)):
    """Number of applications in each status."""
    by_status = manager.stats()
    stats = ApplicationStats(total=sum(by_status.values()), by_status=by_status)
    return ItemResponse(message="Application statistics", data=stats)


@router.get("/applications/job/{job_id}", response_model=ListResponse[ApplicationResponse])
def list_job_applications(
    job_id: str,
    manager: ApplicationLifecycleManager = Depends(get_application_manager)
):
    applications = manager.list_by_job(job_id)
    return _applications_list(applications, f"Found {len(applications)} applications for job")


@router.get("/applications/status/{status}", response_model=ListResponse[ApplicationResponse])
def list_applications_by_status(
    status: str,
    manager: ApplicationLifecycleManager = Depends(get_application_manager)
):
    applications = manager.list_by_status(status)
    return _applications_list(applications, f"Found {len(applications)} {status} applications")


@router.get("/applications/detail/{application_id}", response_model=ItemResponse[ApplicationResponse])
def get_application(
    application_id: str,
    manager: ApplicationLifecycleManager = Depends(get_application_manager)
):
    application = manager.get(application_id)
    return ItemResponse(message="Application found", data=format_application(application))


@router.get("/applications/{candidate_id}", response_model=CandidateApplicationsResponse)
def list_candidate_applications(
    candidate_id: str,
    manager: ApplicationLifecycleManager = Depends(get_application_manager)
):
    """
    All applications of one candidate, newest first, with the candidate's
    details in candidateInfo.

    Raises:
        404: If the candidate doesn't exist
    """
    candidate, applications = manager.list_by_candidate(candidate_id)
    return CandidateApplicationsResponse(
        message=f"Found {len(applications)} applications for candidate",
        count=len(applications),
        data=[format_application(a) for a in applications],
        candidate_info=candidate_ref(candidate),
    )


@router.put("/applications/{application_id}", response_model=ItemResponse[ApplicationResponse])
def update_application_status(
    application_id: str,
    request: ApplicationStatusUpdateRequest,
    manager: ApplicationLifecycleManager = Depends(get_application_manager)
):
    """
    Change an application's status. appliedAt is never modified.

    Raises:
        400: Missing or invalid status (body lists the valid values)
        404: If the application doesn't exist
    """
    application = manager.update_status(application_id, request.status)
    return ItemResponse(message="Application status updated successfully", data=format_application(application))
