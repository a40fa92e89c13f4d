"""
Shared pydantic building blocks: camelCase base model, response envelopes
and the compact reference shapes embedded in other responses.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from uuid import UUID
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class ItemResponse(CamelModel, Generic[T]):
    """Envelope for single-record responses"""
    success: bool = True
    message: str
    data: T


class ListResponse(CamelModel, Generic[T]):
    """Envelope for list responses"""
    success: bool = True
    message: str
    count: int
    data: List[T]


class DeleteResponse(CamelModel):
    success: bool = True
    message: str
    id: UUID


class EmployerRef(CamelModel):
    id: UUID
    company_name: str
    email: str


class CandidateRef(CamelModel):
    id: UUID
    name: str
    email: str


class JobSummary(CamelModel):
    """Job fields shown alongside an application."""
    id: UUID
    title: str
    location: str
    salary: float
    salary_range: str


class ResumeRef(CamelModel):
    id: UUID
    file_url: str


class Timestamps(CamelModel):
    created_at: datetime
    updated_at: Optional[datetime] = None
