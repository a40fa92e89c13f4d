"""
Pydantic schemas for Employer API requests/responses.
"""

from typing import Optional
from uuid import UUID
from pydantic import EmailStr, Field, field_validator
from jobboard.schemas.common import CamelModel, Timestamps


class EmployerCreateRequest(CamelModel):
    """Schema for registering an employer"""
    company_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class EmployerUpdateRequest(CamelModel):
    """Partial update; omitted fields are left untouched"""
    company_name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v


class EmployerResponse(Timestamps):
    id: UUID
    company_name: str
    email: str
