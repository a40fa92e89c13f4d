from pydantic import Field
from typing import Optional
from uuid import UUID
from jobboard.schemas.common import CamelModel, EmployerRef, Timestamps


class JobCreateRequest(CamelModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=3, max_length=100)
    description: str = Field(..., min_length=10, max_length=2000)
    location: str = Field(..., min_length=2, max_length=100)
    salary: float = Field(..., ge=0, le=10_000_000)
    # Parsed by the endpoint so a malformed id is reported against employerId
    employer_id: str = Field(..., min_length=1)


class JobUpdateRequest(CamelModel):
    """Schema for partially updating a job"""
    title: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=10, max_length=2000)
    location: Optional[str] = Field(None, min_length=2, max_length=100)
    salary: Optional[float] = Field(None, ge=0, le=10_000_000)
    employer_id: Optional[str] = None


class JobResponse(Timestamps):
    """Schema for job response"""
    id: UUID
    title: str
    description: str
    location: str
    salary: float
    salary_range: str
    employer: Optional[EmployerRef] = None
