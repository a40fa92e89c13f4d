"""
Application database model.

A candidate's application to a job, submitted with one of the candidate's
resumes. Job, candidate and resume are stored references (validated on
create, never cascaded).
"""

import enum
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Enum, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ApplicationStatus(str, enum.Enum):
    """
    Application review status.

    Any status may move to any other; there is no forward-only ordering.
    """
    APPLIED = "applied"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class Application(Base):
    __tablename__ = "applications"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    job_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    candidate_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    resume_id = Column(UUID(as_uuid=True), nullable=False)

    status = Column(
        Enum(
            ApplicationStatus,
            name="applicationstatus",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=ApplicationStatus.APPLIED,
        nullable=False,
        index=True,
    )

    # Set once on insert; status updates never touch it
    applied_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    job = relationship("Job", primaryjoin="foreign(Application.job_id) == Job.id", viewonly=True)
    candidate = relationship("Candidate", primaryjoin="foreign(Application.candidate_id) == Candidate.id", viewonly=True)
    resume = relationship("Resume", primaryjoin="foreign(Application.resume_id) == Resume.id", viewonly=True)

    __table_args__ = (
        # One application per candidate per job, for the lifetime of the record
        UniqueConstraint("candidate_id", "job_id", name="uq_applications_candidate_job"),
    )

    @property
    def display_info(self) -> str:
        status = self.status.value if isinstance(self.status, ApplicationStatus) else self.status
        return f"Application {self.id} - Status: {status}"

    def __repr__(self):
        return f"<Application(id={self.id}, candidate_id={self.candidate_id}, job_id={self.job_id})>"
