"""
CRUD operations for Candidate model.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from jobboard.models.candidate import Candidate
from jobboard.schemas.candidate import CandidateCreateRequest


def create(db: Session, candidate_data: CandidateCreateRequest) -> Candidate:
    """
    Create a new candidate in the database.

    Args:
        db: Database session
        candidate_data: Validated candidate data (email already lowercased)

    Returns:
        Created Candidate instance with id

    Raises:
        sqlalchemy.exc.IntegrityError: If the email is already registered
    """
    db_candidate = Candidate(
        name=candidate_data.name,
        email=candidate_data.email,
    )

    db.add(db_candidate)
    db.commit()
    db.refresh(db_candidate)

    return db_candidate


def get_by_id(db: Session, candidate_id: UUID) -> Optional[Candidate]:
    """
    Retrieve a candidate by its ID.

    Returns:
        Candidate instance if found, None otherwise
    """
    return db.query(Candidate).filter(Candidate.id == candidate_id).first()


def get_by_email(db: Session, email: str) -> Optional[Candidate]:
    return db.query(Candidate).filter(Candidate.email == email.strip().lower()).first()


def get_multi(db: Session, skip: int = 0, limit: int = 100) -> List[Candidate]:
    return (
        db.query(Candidate)
        .order_by(Candidate.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def search_by_name(db: Session, term: str) -> List[Candidate]:
    """Case-insensitive substring match on candidate name; % and _ match literally."""
    return (
        db.query(Candidate)
        .filter(Candidate.name.icontains(term.strip(), autoescape=True))
        .order_by(Candidate.name)
        .all()
    )


def update(db: Session, candidate: Candidate, changes: Dict[str, Any]) -> Candidate:
    for field, value in changes.items():
        setattr(candidate, field, value)

    db.commit()
    db.refresh(candidate)

    return candidate


def delete(db: Session, candidate_id: UUID) -> bool:
    """
    Delete a candidate by ID. Resumes and applications keep their reference.

    Returns:
        True if deleted, False if not found
    """
    candidate = get_by_id(db, candidate_id)
    if not candidate:
        return False

    db.delete(candidate)
    db.commit()

    return True


def count(db: Session) -> int:
    return db.query(Candidate).count()
