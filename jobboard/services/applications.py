"""
Application lifecycle.

Owns the invariants of job applications:

- job, candidate and resume must exist, checked in that order
- the resume must belong to the applying candidate
- at most one application per (candidate, job), ever
- new applications start as "applied"; applied_at is set once
- status may move freely between applied, shortlisted and rejected

The duplicate pre-check only exists to produce a helpful error. The unique
constraint on (candidate_id, job_id) is what actually guarantees the
invariant when two requests race; losing that race is reported exactly like
the pre-check.
"""

import logging
from types import ModuleType
from typing import Any, Dict, List, Optional, Tuple, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard import crud
from jobboard.core.errors import (
    ConstraintViolationError,
    DuplicateApplicationError,
    InvalidEnumError,
    InvalidReferenceError,
    MissingFieldError,
    NotFoundError,
)
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.candidate import Candidate
from jobboard.services.application_events import ApplicationEventLog
from jobboard.services.references import EntityKind, ReferenceValidator, parse_reference_id

logger = logging.getLogger(__name__)

# Request field names in the order they are validated
CREATE_FIELDS = (
    ("jobId", "Job ID", EntityKind.JOB),
    ("candidateId", "Candidate ID", EntityKind.CANDIDATE),
    ("resumeId", "Resume ID", EntityKind.RESUME),
)


def parse_status(value: Any, field: str = "status") -> ApplicationStatus:
    """
    Exact, case-sensitive match against the known statuses; surrounding
    whitespace makes a value invalid.

    Raises:
        MissingFieldError: If value is absent or the empty string
        InvalidEnumError: If value is not a known status (lists the valid ones)
    """
    if value is None or value == "":
        raise MissingFieldError(field, "Status is required")
    try:
        return ApplicationStatus(value)
    except (TypeError, ValueError):
        raise InvalidEnumError(field, ApplicationStatus.values()) from None


class ApplicationLifecycleManager:
    """
    Create, transition and list job applications.

    Args:
        db: Database session for the current request
        references: Validator used for every existence/ownership check
        applications: Application store (CRUD module)
        events: Observability collaborator notified around each write
    """

    def __init__(
        self,
        db: Session,
        references: ReferenceValidator,
        applications: ModuleType = crud.application,
        events: Optional[ApplicationEventLog] = None,
    ):
        self.db = db
        self.references = references
        self.applications = applications
        self.events = events or ApplicationEventLog()

    def create(
        self,
        job_id: Union[str, UUID, None],
        candidate_id: Union[str, UUID, None],
        resume_id: Union[str, UUID, None],
    ) -> Application:
        """
        Submit an application.

        Returns:
            The persisted application with job, candidate and resume loaded

        Raises:
            MissingFieldError, InvalidFormatError, NotFoundError,
            InvalidReferenceError, DuplicateApplicationError,
            ConstraintViolationError
        """
        raw = {"jobId": job_id, "candidateId": candidate_id, "resumeId": resume_id}

        for field, label, _ in CREATE_FIELDS:
            value = raw[field]
            if value is None or (isinstance(value, str) and not value.strip()):
                raise MissingFieldError(field, f"{label} is required")

        ids = {field: parse_reference_id(raw[field], field) for field, _, _ in CREATE_FIELDS}

        for field, _, kind in CREATE_FIELDS:
            self.references.require(kind, ids[field], field)

        if not self.references.resume_belongs_to_candidate(ids["resumeId"], ids["candidateId"]):
            raise InvalidReferenceError(
                "Resume does not belong to the specified candidate",
                field="resumeId",
            )

        job_uuid, candidate_uuid, resume_uuid = ids["jobId"], ids["candidateId"], ids["resumeId"]

        existing = self.applications.get_by_candidate_and_job(self.db, candidate_uuid, job_uuid)
        if existing:
            raise DuplicateApplicationError(existing.id)

        self.events.creating(candidate_uuid, job_uuid)
        try:
            application = self.applications.create(self.db, job_uuid, candidate_uuid, resume_uuid)
        except IntegrityError:
            self.db.rollback()
            winner = self.applications.get_by_candidate_and_job(self.db, candidate_uuid, job_uuid)
            if winner:
                logger.info(f"Concurrent duplicate application for candidate {candidate_uuid}, job {job_uuid}")
                raise DuplicateApplicationError(winner.id) from None
            raise ConstraintViolationError("Application violates a database constraint") from None

        self.events.created(application)
        return self.applications.get_by_id(self.db, application.id)

    def update_status(self, application_id: Union[str, UUID], status: Optional[str]) -> Application:
        """
        Move an application to a new status.

        The status is validated before the lookup, so an invalid value never
        touches the record. Any status may follow any other.

        Raises:
            MissingFieldError, InvalidEnumError, NotFoundError
        """
        new_status = parse_status(status)
        application_uuid = parse_reference_id(application_id, "id")

        application = self.applications.get_by_id(self.db, application_uuid)
        if not application:
            raise NotFoundError("application", field="id")

        self.events.status_changing(application.id, new_status)
        application = self.applications.update_status(self.db, application, new_status)
        self.events.status_changed(application)

        return self.applications.get_by_id(self.db, application.id)

    def get(self, application_id: Union[str, UUID]) -> Application:
        application_uuid = parse_reference_id(application_id, "id")
        application = self.applications.get_by_id(self.db, application_uuid)
        if not application:
            raise NotFoundError("application", field="id")
        return application

    def list_all(self, skip: int = 0, limit: int = 100, status: Optional[str] = None) -> List[Application]:
        status_filter = parse_status(status) if status is not None else None
        return self.applications.get_multi(self.db, skip=skip, limit=limit, status=status_filter)

    def list_by_candidate(self, candidate_id: Union[str, UUID]) -> Tuple[Candidate, List[Application]]:
        """
        Applications of one candidate, newest first.

        Raises:
            NotFoundError: If the candidate does not exist
        """
        candidate_uuid = parse_reference_id(candidate_id, "candidateId")
        candidate = self.references.require(EntityKind.CANDIDATE, candidate_uuid, "candidateId")
        return candidate, self.applications.get_by_candidate(self.db, candidate_uuid)

    def list_by_job(self, job_id: Union[str, UUID]) -> List[Application]:
        job_uuid = parse_reference_id(job_id, "jobId")
        return self.applications.get_by_job(self.db, job_uuid)

    def list_by_status(self, status: Optional[str]) -> List[Application]:
        return self.applications.get_by_status(self.db, parse_status(status))

    def stats(self) -> Dict[str, int]:
        return self.applications.count_by_status(self.db)
