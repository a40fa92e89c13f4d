"""
API endpoints for candidate management.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.errors import DuplicateRecordError, NotFoundError
from jobboard.crud import candidate as candidate_crud
from jobboard.schemas.candidate import CandidateCreateRequest, CandidateResponse, CandidateUpdateRequest
from jobboard.schemas.common import DeleteResponse, ItemResponse, ListResponse
from jobboard.services.formatting import format_candidate
from jobboard.services.references import parse_reference_id

router = APIRouter(prefix="/candidates", tags=["Candidates"])
logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "A candidate with this email already exists"


def _get_or_404(db: Session, candidate_id: str):
    candidate = candidate_crud.get_by_id(db, parse_reference_id(candidate_id, "id"))
    if not candidate:
        raise NotFoundError("candidate")
    return candidate


@router.post("/", status_code=201, response_model=ItemResponse[CandidateResponse])
def create_candidate(request: CandidateCreateRequest, db: Session = Depends(get_db)):
    """
    Register a new candidate.

    Raises:
        DuplicateRecordError 409: If the email is already registered
    """
    if candidate_crud.get_by_email(db, request.email):
        raise DuplicateRecordError(DUPLICATE_EMAIL, field="email")

    try:
        candidate = candidate_crud.create(db, request)
    except IntegrityError:
        db.rollback()
        raise DuplicateRecordError(DUPLICATE_EMAIL, field="email") from None

    logger.info(f"Created candidate {candidate.id}: {candidate.display_name}")
    return ItemResponse(message="Candidate created successfully", data=format_candidate(candidate))


@router.get("/", response_model=ListResponse[CandidateResponse])
def list_candidates(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    db: Session = Depends(get_db)
):
    limit = min(limit, 100)
    candidates = candidate_crud.get_multi(db, skip=skip, limit=limit)
    return ListResponse(
        message=f"Found {len(candidates)} candidates",
        count=len(candidates),
        data=[format_candidate(c) for c in candidates],
    )


@router.get("/search", response_model=ListResponse[CandidateResponse])
def search_candidates(name: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    """Case-insensitive substring search on candidate name."""
    candidates = candidate_crud.search_by_name(db, name)
    return ListResponse(
        message=f"Found {len(candidates)} candidates matching '{name}'",
        count=len(candidates),
        data=[format_candidate(c) for c in candidates],
    )


@router.get("/{candidate_id}", response_model=ItemResponse[CandidateResponse])
def get_candidate(candidate_id: str, db: Session = Depends(get_db)):
    candidate = _get_or_404(db, candidate_id)
    return ItemResponse(message="Candidate found", data=format_candidate(candidate))


@router.put("/{candidate_id}", response_model=ItemResponse[CandidateResponse])
def update_candidate(candidate_id: str, request: CandidateUpdateRequest, db: Session = Depends(get_db)):
    candidate = _get_or_404(db, candidate_id)
    changes = request.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in changes:
        holder = candidate_crud.get_by_email(db, changes["email"])
        if holder and holder.id != candidate.id:
            raise DuplicateRecordError(DUPLICATE_EMAIL, field="email")

    try:
        candidate = candidate_crud.update(db, candidate, changes)
    except IntegrityError:
        db.rollback()
        raise DuplicateRecordError(DUPLICATE_EMAIL, field="email") from None

    logger.info(f"Updated candidate {candidate.id}: {sorted(changes)}")
    return ItemResponse(message="Candidate updated successfully", data=format_candidate(candidate))


@router.delete("/{candidate_id}", response_model=DeleteResponse)
def delete_candidate(candidate_id: str, db: Session = Depends(get_db)):
    """
    Delete a candidate by ID.

    Resumes and applications that reference the candidate are left in place.
    """
    candidate_uuid = parse_reference_id(candidate_id, "id")
    if not candidate_crud.delete(db, candidate_uuid):
        raise NotFoundError("candidate")

    logger.info(f"Deleted candidate {candidate_uuid}")
    return DeleteResponse(message="Candidate deleted successfully", id=candidate_uuid)
