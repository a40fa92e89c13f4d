"""
Candidate database model.

Represents a job seeker registered on the platform. Candidates own resumes
and submit applications; neither relationship is cascaded.
"""

import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from jobboard.core.database import Base


class Candidate(Base):
    """
    A job seeker. Email is unique across candidates and stored lowercased.
    """
    __tablename__ = "candidates"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(100), nullable=False, index=True)
    email = Column(String(254), unique=True, nullable=False, index=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.email})"

    def __repr__(self):
        return f"<Candidate(id={self.id}, name='{self.name}')>"
