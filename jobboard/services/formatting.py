"""
Response shaping.

Turns ORM records into the API response schemas: attaches derived display
fields and embeds compact views of referenced records. A reference whose
target has been deleted is rendered as None.
"""

from datetime import datetime
from typing import Optional

from jobboard.models.application import Application
from jobboard.models.candidate import Candidate
from jobboard.models.employer import Employer
from jobboard.models.job import Job
from jobboard.models.resume import Resume
from jobboard.schemas.application import ApplicationResponse
from jobboard.schemas.candidate import CandidateResponse
from jobboard.schemas.common import CandidateRef, EmployerRef, JobSummary, ResumeRef
from jobboard.schemas.employer import EmployerResponse
from jobboard.schemas.job import JobResponse
from jobboard.schemas.resume import ResumeResponse
from jobboard.services.display import days_old, file_extension, salary_band, status_color


def employer_ref(employer: Optional[Employer]) -> Optional[EmployerRef]:
    if employer is None:
        return None
    return EmployerRef(id=employer.id, company_name=employer.company_name, email=employer.email)


def candidate_ref(candidate: Optional[Candidate]) -> Optional[CandidateRef]:
    if candidate is None:
        return None
    return CandidateRef(id=candidate.id, name=candidate.name, email=candidate.email)


def job_summary(job: Optional[Job]) -> Optional[JobSummary]:
    if job is None:
        return None
    return JobSummary(
        id=job.id,
        title=job.title,
        location=job.location,
        salary=job.salary,
        salary_range=salary_band(job.salary),
    )


def resume_ref(resume: Optional[Resume]) -> Optional[ResumeRef]:
    if resume is None:
        return None
    return ResumeRef(id=resume.id, file_url=resume.file_url)


def format_employer(employer: Employer) -> EmployerResponse:
    return EmployerResponse.model_validate(employer)


def format_candidate(candidate: Candidate) -> CandidateResponse:
    return CandidateResponse.model_validate(candidate)


def format_job(job: Job) -> JobResponse:
    return JobResponse(
        id=job.id,
        title=job.title,
        description=job.description,
        location=job.location,
        salary=job.salary,
        salary_range=salary_band(job.salary),
        employer=employer_ref(job.employer),
        created_at=job.created_at,
        updated_at=job.updated_at,
    )


def format_resume(resume: Resume) -> ResumeResponse:
    return ResumeResponse(
        id=resume.id,
        file_url=resume.file_url,
        file_extension=file_extension(resume.file_url),
        candidate=candidate_ref(resume.candidate),
        created_at=resume.created_at,
        updated_at=resume.updated_at,
    )


def format_application(application: Application, now: Optional[datetime] = None) -> ApplicationResponse:
    status = getattr(application.status, "value", application.status)
    return ApplicationResponse(
        id=application.id,
        status=status,
        status_color=status_color(status),
        applied_at=application.applied_at,
        days_old=days_old(application.applied_at, now=now),
        job=job_summary(application.job),
        candidate=candidate_ref(application.candidate),
        resume=resume_ref(application.resume),
        created_at=application.created_at,
        updated_at=application.updated_at,
    )
