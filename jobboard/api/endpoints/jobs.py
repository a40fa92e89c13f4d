import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_reference_validator
from jobboard.core.errors import NotFoundError
from jobboard.crud import job as job_crud
from jobboard.schemas.common import DeleteResponse, ItemResponse, ListResponse
from jobboard.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest
from jobboard.services.formatting import format_job
from jobboard.services.references import EntityKind, ReferenceValidator, parse_reference_id

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def _jobs_list(jobs, message: str) -> ListResponse[JobResponse]:
    return ListResponse(message=message, count=len(jobs), data=[format_job(j) for j in jobs])


@router.post("/", status_code=201, response_model=ItemResponse[JobResponse])
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    references: ReferenceValidator = Depends(get_reference_validator)
):
    """
    Post a new job for an existing employer.

    Flow:
    1. Body validated (lengths, salary bounds)
    2. employerId parsed and checked against the employer store
    3. Job saved and returned with its employer embedded

    Raises:
        InvalidFormatError 400: If employerId is not a valid id
        NotFoundError 404: If the employer doesn't exist
    """
    employer_id = parse_reference_id(request.employer_id, "employerId")
    references.require(EntityKind.EMPLOYER, employer_id, "employerId")

    new_job = job_crud.create(db, request, employer_id)
    new_job = job_crud.get_by_id(db, new_job.id)

    logger.info(f"Created job {new_job.id}: {new_job.display_info}")
    return ItemResponse(message="Job created successfully", data=format_job(new_job))


@router.get("/", response_model=ListResponse[JobResponse])
def list_jobs(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    db: Session = Depends(get_db)
):
    """
    List all jobs with pagination, newest first.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100, max: 100)
    """
    if limit > 100:
        limit = 100

    jobs = job_crud.get_multi(db, skip=skip, limit=limit)
    return _jobs_list(jobs, f"Found {len(jobs)} jobs")


@router.get("/search", response_model=ListResponse[JobResponse])
def search_jobs(
    title: Optional[str] = None,
    location: Optional[str] = None,
    min_salary: Optional[float] = Query(None, alias="minSalary", ge=0),
    max_salary: Optional[float] = Query(None, alias="maxSalary", ge=0),
    db: Session = Depends(get_db)
):
    """
    Search jobs.

    When either salary bound is given the result is every job inside the
    bounds, highest salary first. Otherwise title (matched against title and
    description) and location filter the jobs, newest first.
    """
    if min_salary is not None or max_salary is not None:
        jobs = job_crud.get_by_salary_range(db, min_salary, max_salary)
    else:
        jobs = job_crud.search(db, term=title, location=location)

    logger.info(f"Job search title={title!r} location={location!r} salary={min_salary}-{max_salary} matched {len(jobs)} jobs")
    return _jobs_list(jobs, f"Found {len(jobs)} jobs matching search criteria")


@router.get("/employer/{employer_id}", response_model=ListResponse[JobResponse])
def list_jobs_by_employer(
    employer_id: str,
    db: Session = Depends(get_db),
    references: ReferenceValidator = Depends(get_reference_validator)
):
    """
    Jobs posted by one employer.

    Raises:
        NotFoundError 404: If the employer doesn't exist
    """
    employer_uuid = parse_reference_id(employer_id, "employerId")
    employer = references.require(EntityKind.EMPLOYER, employer_uuid, "employerId")

    jobs = job_crud.get_by_employer(db, employer_uuid)
    return _jobs_list(jobs, f"Found {len(jobs)} jobs for {employer.company_name}")


@router.get("/{job_id}", response_model=ItemResponse[JobResponse])
def get_job(job_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID. The salaryRange field is derived from the salary.
    """
    job = job_crud.get_by_id(db, parse_reference_id(job_id, "id"))

    if not job:
        raise NotFoundError("job")

    return ItemResponse(message="Job found", data=format_job(job))


@router.put("/{job_id}", response_model=ItemResponse[JobResponse])
def update_job(
    job_id: str,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    references: ReferenceValidator = Depends(get_reference_validator)
):
    """
    Partially update a job. A new employerId must reference an existing employer.
    """
    job = job_crud.get_by_id(db, parse_reference_id(job_id, "id"))
    if not job:
        raise NotFoundError("job")

    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    if "employer_id" in changes:
        employer_id = parse_reference_id(changes["employer_id"], "employerId")
        references.require(EntityKind.EMPLOYER, employer_id, "employerId")
        changes["employer_id"] = employer_id

    job_crud.update(db, job, changes)
    job = job_crud.get_by_id(db, job.id)

    logger.info(f"Updated job {job.id}: {sorted(changes)}")
    return ItemResponse(message="Job updated successfully", data=format_job(job))


@router.delete("/{job_id}", response_model=DeleteResponse)
def delete_job(job_id: str, db: Session = Depends(get_db)):
    """
    Delete a job by ID. Applications for the job keep their reference.
    """
    job_uuid = parse_reference_id(job_id, "id")
    deleted = job_crud.delete(db, job_uuid)

    if not deleted:
        raise NotFoundError("job")

    logger.info(f"Deleted job {job_uuid}")
    return DeleteResponse(message="Job deleted successfully", id=job_uuid)
