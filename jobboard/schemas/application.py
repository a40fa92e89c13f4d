"""
Pydantic schemas for job application requests/responses.

The create and status-update payloads accept any JSON value and keep every
field optional. The lifecycle manager then reports a missing, malformed or
unknown value with the exact field name instead of a generic validation
failure, and compares statuses exactly as sent.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID
from pydantic import Field
from jobboard.schemas.common import (
    CamelModel,
    CandidateRef,
    JobSummary,
    ListResponse,
    ResumeRef,
)


class ApplicationCreateRequest(CamelModel):
    job_id: Optional[Any] = None
    candidate_id: Optional[Any] = None
    resume_id: Optional[Any] = None


class ApplicationStatusUpdateRequest(CamelModel):
    status: Optional[Any] = Field(None, description="applied, shortlisted or rejected")


class ApplicationResponse(CamelModel):
    id: UUID
    status: str
    status_color: str
    applied_at: datetime
    days_old: int
    job: Optional[JobSummary] = None
    candidate: Optional[CandidateRef] = None
    resume: Optional[ResumeRef] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class CandidateApplicationsResponse(ListResponse[ApplicationResponse]):
    """Applications of one candidate, with the candidate echoed back."""
    candidate_info: CandidateRef


class ApplicationStats(CamelModel):
    total: int
    by_status: Dict[str, int]
