"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload
from jobboard.models.job import Job
from jobboard.schemas.job import JobCreateRequest


def _with_employer(query):
    return query.options(joinedload(Job.employer))


def create(db: Session, job_data: JobCreateRequest, employer_id: UUID) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data
        employer_id: Parsed id of an employer the caller has already verified

    Returns:
        Created Job instance with id
    """
    db_job = Job(
        title=job_data.title,
        description=job_data.description,
        location=job_data.location,
        salary=job_data.salary,
        employer_id=employer_id,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: UUID) -> Optional[Job]:
    """
    Retrieve a job by its ID, with its employer loaded.

    Returns:
        Job instance if found, None otherwise
    """
    return _with_employer(db.query(Job)).filter(Job.id == job_id).first()


def get_multi(db: Session, skip: int = 0, limit: int = 100) -> List[Job]:
    """
    Retrieve jobs newest first with pagination.

    Args:
        db: Database session
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return

    Returns:
        List of Job instances
    """
    return (
        _with_employer(db.query(Job))
        .order_by(Job.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_by_employer(db: Session, employer_id: UUID) -> List[Job]:
    """All jobs posted by one employer, newest first."""
    return (
        _with_employer(db.query(Job))
        .filter(Job.employer_id == employer_id)
        .order_by(Job.created_at.desc())
        .all()
    )


def search(db: Session, term: Optional[str] = None, location: Optional[str] = None) -> List[Job]:
    """
    Search jobs by keyword and/or location, newest first.

    Args:
        db: Database session
        term: Case-insensitive keyword matched against title and description
        location: Case-insensitive substring of the location

    Returns:
        Matching jobs; every job when neither filter is given. % and _ in
        either filter match literally.
    """
    query = _with_employer(db.query(Job))

    if term:
        kw = term.strip()
        query = query.filter(or_(
            Job.title.icontains(kw, autoescape=True),
            Job.description.icontains(kw, autoescape=True),
        ))

    if location:
        query = query.filter(Job.location.icontains(location.strip(), autoescape=True))

    return query.order_by(Job.created_at.desc()).all()


def get_by_salary_range(
    db: Session,
    min_salary: Optional[float] = None,
    max_salary: Optional[float] = None
) -> List[Job]:
    """
    Jobs whose salary lies within the inclusive bounds, highest salary first.
    """
    query = _with_employer(db.query(Job))

    if min_salary is not None:
        query = query.filter(Job.salary >= min_salary)
    if max_salary is not None:
        query = query.filter(Job.salary <= max_salary)

    return query.order_by(Job.salary.desc()).all()


def update(db: Session, job: Job, changes: Dict[str, Any]) -> Job:
    """
    Apply a partial update to a job.

    Args:
        db: Database session
        job: Job instance to modify
        changes: Column name -> new value (employer_id already parsed and verified)

    Returns:
        Updated Job instance
    """
    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: UUID) -> bool:
    """
    Delete a job by ID.

    Args:
        db: Database session
        job_id: Job ID to delete

    Returns:
        True if deleted, False if not found
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True


def count(db: Session) -> int:
    return db.query(Job).count()
