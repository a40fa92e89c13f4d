"""
CRUD operations for Application model.

Every read loads the referenced job, candidate and resume in the same query
so responses can be shaped without further round trips.
"""

from typing import Dict, List, Optional
from uuid import UUID
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload
from jobboard.models.application import Application, ApplicationStatus


def _with_references(query):
    return query.options(
        joinedload(Application.job),
        joinedload(Application.candidate),
        joinedload(Application.resume),
    )


def create(db: Session, job_id: UUID, candidate_id: UUID, resume_id: UUID) -> Application:
    """
    Insert a new application with status=applied and applied_at=now.

    Args:
        db: Database session
        job_id: Parsed, verified job id
        candidate_id: Parsed, verified candidate id
        resume_id: Parsed, verified resume id owned by the candidate

    Returns:
        Created Application instance with id

    Raises:
        sqlalchemy.exc.IntegrityError: If (candidate_id, job_id) already exists
    """
    db_application = Application(
        job_id=job_id,
        candidate_id=candidate_id,
        resume_id=resume_id,
        status=ApplicationStatus.APPLIED,
    )

    db.add(db_application)
    db.commit()
    db.refresh(db_application)

    return db_application


def get_by_id(db: Session, application_id: UUID) -> Optional[Application]:
    """
    Retrieve an application by its ID with references loaded.

    Returns:
        Application instance if found, None otherwise
    """
    return _with_references(db.query(Application)).filter(Application.id == application_id).first()


def get_by_candidate_and_job(db: Session, candidate_id: UUID, job_id: UUID) -> Optional[Application]:
    return (
        db.query(Application)
        .filter(Application.candidate_id == candidate_id, Application.job_id == job_id)
        .first()
    )


def get_multi(
    db: Session,
    skip: int = 0,
    limit: int = 100,
    status: Optional[ApplicationStatus] = None
) -> List[Application]:
    """
    Retrieve applications newest first, optionally filtered by status.

    Args:
        db: Database session
        skip: Number of records to skip (offset)
        limit: Maximum number of records to return
        status: Optional status filter

    Returns:
        List of Application instances
    """
    query = _with_references(db.query(Application))

    if status:
        query = query.filter(Application.status == status)

    return query.order_by(Application.applied_at.desc()).offset(skip).limit(limit).all()


def get_by_candidate(db: Session, candidate_id: UUID) -> List[Application]:
    return (
        _with_references(db.query(Application))
        .filter(Application.candidate_id == candidate_id)
        .order_by(Application.applied_at.desc())
        .all()
    )


def get_by_job(db: Session, job_id: UUID) -> List[Application]:
    return (
        _with_references(db.query(Application))
        .filter(Application.job_id == job_id)
        .order_by(Application.applied_at.desc())
        .all()
    )


def get_by_status(db: Session, status: ApplicationStatus) -> List[Application]:
    return (
        _with_references(db.query(Application))
        .filter(Application.status == status)
        .order_by(Application.applied_at.desc())
        .all()
    )


def update_status(db: Session, application: Application, status: ApplicationStatus) -> Application:
    """
    Overwrite the status of an application.

    applied_at is left as is; updated_at is refreshed by the column's onupdate.

    Returns:
        Updated Application instance
    """
    application.status = status

    db.commit()
    db.refresh(application)

    return application


def count_by_status(db: Session) -> Dict[str, int]:
    """
    Number of applications per status. Every status is present, zero if unused.
    """
    counts = {status.value: 0 for status in ApplicationStatus}

    rows = db.query(Application.status, func.count(Application.id)).group_by(Application.status).all()
    for status, total in rows:
        key = status.value if isinstance(status, ApplicationStatus) else status
        counts[key] = total

    return counts


def count(db: Session) -> int:
    return db.query(Application).count()
