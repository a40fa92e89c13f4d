"""
API endpoints for resume records.

A resume is a pointer (URL or path) to a document owned by a candidate; the
document itself is not stored here.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.deps import get_reference_validator
from jobboard.core.errors import NotFoundError
from jobboard.crud import resume as resume_crud
from jobboard.schemas.common import DeleteResponse, ItemResponse, ListResponse
from jobboard.schemas.resume import ResumeCreateRequest, ResumeResponse
from jobboard.services.formatting import format_resume
from jobboard.services.references import EntityKind, ReferenceValidator, parse_reference_id

router = APIRouter(prefix="/resumes", tags=["Resumes"])
logger = logging.getLogger(__name__)


def _resumes_list(resumes, message: str) -> ListResponse[ResumeResponse]:
    return ListResponse(message=message, count=len(resumes), data=[format_resume(r) for r in resumes])


@router.post("/", status_code=201, response_model=ItemResponse[ResumeResponse])
def create_resume(
    request: ResumeCreateRequest,
    db: Session = Depends(get_db),
    references: ReferenceValidator = Depends(get_reference_validator)
):
    """
    Record a resume for an existing candidate.

    Raises:
        InvalidFormatError 400: If candidateId is not a valid id
        NotFoundError 404: If the candidate doesn't exist
    """
    candidate_id = parse_reference_id(request.candidate_id, "candidateId")
    references.require(EntityKind.CANDIDATE, candidate_id, "candidateId")

    resume = resume_crud.create(db, candidate_id, request.file_url)
    resume = resume_crud.get_by_id(db, resume.id)

    logger.info(f"Created resume {resume.id} for candidate {candidate_id}")
    return ItemResponse(message="Resume created successfully", data=format_resume(resume))


@router.get("/", response_model=ListResponse[ResumeResponse])
def list_resumes(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=100),
    db: Session = Depends(get_db)
):
    resumes = resume_crud.get_multi(db, skip=skip, limit=limit)
    return _resumes_list(resumes, f"Found {len(resumes)} resumes")


@router.get("/recent", response_model=ListResponse[ResumeResponse])
def list_recent_resumes(limit: int = Query(10, ge=1, le=100), db: Session = Depends(get_db)):
    resumes = resume_crud.get_recent(db, limit=limit)
    return _resumes_list(resumes, f"Found {len(resumes)} recent resumes")


@router.get("/candidate/{candidate_id}", response_model=ListResponse[ResumeResponse])
def list_candidate_resumes(candidate_id: str, db: Session = Depends(get_db)):
    """Resumes of one candidate, newest first. An unknown candidate yields an empty list."""
    candidate_uuid = parse_reference_id(candidate_id, "candidateId")
    resumes = resume_crud.get_by_candidate(db, candidate_uuid)
    return _resumes_list(resumes, f"Found {len(resumes)} resumes for candidate")


@router.get("/{resume_id}", response_model=ItemResponse[ResumeResponse])
def get_resume(resume_id: str, db: Session = Depends(get_db)):
    resume = resume_crud.get_by_id(db, parse_reference_id(resume_id, "id"))
    if not resume:
        raise NotFoundError("resume")
    return ItemResponse(message="Resume found", data=format_resume(resume))


@router.delete("/{resume_id}", response_model=DeleteResponse)
def delete_resume(resume_id: str, db: Session = Depends(get_db)):
    resume_uuid = parse_reference_id(resume_id, "id")
    if not resume_crud.delete(db, resume_uuid):
        raise NotFoundError("resume")

    logger.info(f"Deleted resume {resume_uuid}")
    return DeleteResponse(message="Resume deleted successfully", id=resume_uuid)
