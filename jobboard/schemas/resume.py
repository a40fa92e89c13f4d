"""
Pydantic schemas for Resume API requests/responses.
"""

from typing import Optional
from uuid import UUID
from pydantic import Field
from jobboard.schemas.common import CamelModel, CandidateRef, Timestamps


class ResumeCreateRequest(CamelModel):
    candidate_id: str = Field(..., min_length=1)
    file_url: str = Field(..., min_length=1, max_length=1000, description="URL or path of the resume document")


class ResumeResponse(Timestamps):
    id: UUID
    file_url: str
    file_extension: str
    candidate: Optional[CandidateRef] = None
