"""
Pydantic schemas for Candidate API requests/responses.
"""

from typing import Optional
from uuid import UUID
from pydantic import EmailStr, Field, field_validator
from jobboard.schemas.common import CamelModel, Timestamps


class CandidateCreateRequest(CamelModel):
    """Schema for registering a job seeker."""
    name: str = Field(..., min_length=2, max_length=100, description="Candidate full name")
    email: EmailStr = Field(..., description="Unique contact email, stored lowercased")

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class CandidateUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v


class CandidateResponse(Timestamps):
    """Full candidate response."""
    id: UUID
    name: str
    email: str
