import uuid
from sqlalchemy import Column, String, Float, DateTime, CheckConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class Job(Base):
    """
    Job model representing a job posting created by an employer.

    employer_id is a plain stored reference: it is validated when the job is
    written but the database does not enforce it, so deleting an employer
    leaves its jobs in place.
    """
    __tablename__ = "jobs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String(100), nullable=False, index=True)
    description = Column(String(2000), nullable=False)
    location = Column(String(100), nullable=False, index=True)
    salary = Column(Float, nullable=False, index=True)
    employer_id = Column(UUID(as_uuid=True), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    employer = relationship(
        "Employer",
        primaryjoin="foreign(Job.employer_id) == Employer.id",
        viewonly=True,
    )

    __table_args__ = (
        CheckConstraint("salary >= 0 AND salary <= 10000000", name="ck_jobs_salary_range"),
    )

    @property
    def display_info(self) -> str:
        return f"{self.title} - {self.location} (${self.salary:,.0f})"

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}')>"
