"""
Resume database model.

A resume is a pointer (URL or path) to a document owned by one candidate.
"""

import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    candidate_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    file_url = Column(String(1000), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    candidate = relationship(
        "Candidate",
        primaryjoin="foreign(Resume.candidate_id) == Candidate.id",
        viewonly=True,
    )

    def __repr__(self):
        return f"<Resume(id={self.id}, candidate_id={self.candidate_id})>"
