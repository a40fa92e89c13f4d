"""
API endpoints for employer management.
"""

import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.core.errors import DuplicateRecordError, NotFoundError
from jobboard.crud import employer as employer_crud
from jobboard.schemas.common import DeleteResponse, ItemResponse, ListResponse
from jobboard.schemas.employer import EmployerCreateRequest, EmployerResponse, EmployerUpdateRequest
from jobboard.services.formatting import format_employer
from jobboard.services.references import parse_reference_id

router = APIRouter(prefix="/employers", tags=["Employers"])
logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "An employer with this email already exists"


def _get_or_404(db: Session, employer_id: str):
    employer = employer_crud.get_by_id(db, parse_reference_id(employer_id, "id"))
    if not employer:
        raise NotFoundError("employer")
    return employer


@router.post("/", status_code=201, response_model=ItemResponse[EmployerResponse])
def create_employer(request: EmployerCreateRequest, db: Session = Depends(get_db)):
    """
    Register a new employer.

    The email is stored lowercased and must be unique across employers.

    Raises:
        DuplicateRecordError 409: If the email is already registered
    """
    if employer_crud.get_by_email(db, request.email):
        raise DuplicateRecordError(DUPLICATE_EMAIL, field="email")

    try:
        employer = employer_crud.create(db, request)
    except IntegrityError:
        db.rollback()
        raise DuplicateRecordError(DUPLICATE_EMAIL, field="email") from None

    logger.info(f"Created employer {employer.id}: {employer.display_name}")
    return ItemResponse(message="Employer created successfully", data=format_employer(employer))


@router.get("/", response_model=ListResponse[EmployerResponse])
def list_employers(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1),
    db: Session = Depends(get_db)
):
    """
    List employers, newest first.

    Args:
        skip: Number of records to skip (default: 0)
        limit: Maximum number of records to return (default: 100, max: 100)
    """
    limit = min(limit, 100)
    employers = employer_crud.get_multi(db, skip=skip, limit=limit)
    return ListResponse(
        message=f"Found {len(employers)} employers",
        count=len(employers),
        data=[format_employer(e) for e in employers],
    )


@router.get("/search", response_model=ListResponse[EmployerResponse])
def search_employers(
    company_name: str = Query(..., alias="companyName", min_length=1),
    db: Session = Depends(get_db)
):
    """Case-insensitive substring search on company name."""
    employers = employer_crud.search_by_company_name(db, company_name)
    return ListResponse(
        message=f"Found {len(employers)} employers matching '{company_name}'",
        count=len(employers),
        data=[format_employer(e) for e in employers],
    )


@router.get("/{employer_id}", response_model=ItemResponse[EmployerResponse])
def get_employer(employer_id: str, db: Session = Depends(get_db)):
    employer = _get_or_404(db, employer_id)
    return ItemResponse(message="Employer found", data=format_employer(employer))


@router.put("/{employer_id}", response_model=ItemResponse[EmployerResponse])
def update_employer(employer_id: str, request: EmployerUpdateRequest, db: Session = Depends(get_db)):
    """
    Partially update an employer. Only the fields present in the body change.

    Raises:
        NotFoundError 404: If the employer doesn't exist
        DuplicateRecordError 409: If the new email belongs to another employer
    """
    employer = _get_or_404(db, employer_id)
    changes = request.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in changes:
        holder = employer_crud.get_by_email(db, changes["email"])
        if holder and holder.id != employer.id:
            raise DuplicateRecordError(DUPLICATE_EMAIL, field="email")

    try:
        employer = employer_crud.update(db, employer, changes)
    except IntegrityError:
        db.rollback()
        raise DuplicateRecordError(DUPLICATE_EMAIL, field="email") from None

    logger.info(f"Updated employer {employer.id}: {sorted(changes)}")
    return ItemResponse(message="Employer updated successfully", data=format_employer(employer))


@router.delete("/{employer_id}", response_model=DeleteResponse)
def delete_employer(employer_id: str, db: Session = Depends(get_db)):
    """
    Delete an employer by ID.

    Jobs posted by the employer are kept; their employer renders as null.
    """
    employer_uuid = parse_reference_id(employer_id, "id")
    if not employer_crud.delete(db, employer_uuid):
        raise NotFoundError("employer")

    logger.info(f"Deleted employer {employer_uuid}")
    return DeleteResponse(message="Employer deleted successfully", id=employer_uuid)
