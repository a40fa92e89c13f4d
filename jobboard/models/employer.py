"""
Employer database model.

A company that posts job opportunities on the board.
"""

import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.dialects.postgresql import UUID
from jobboard.core.database import Base


class Employer(Base):
    __tablename__ = "employers"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    company_name = Column(String(100), nullable=False, index=True)
    email = Column(String(254), unique=True, nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def display_name(self) -> str:
        return f"{self.company_name} ({self.email})"

    def __repr__(self):
        return f"<Employer(id={self.id}, company_name='{self.company_name}')>"
