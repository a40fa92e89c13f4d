"""
CRUD operations for Employer model.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID
from sqlalchemy.orm import Session
from jobboard.models.employer import Employer
from jobboard.schemas.employer import EmployerCreateRequest


def create(db: Session, employer_data: EmployerCreateRequest) -> Employer:
    """
    Create a new employer in the database.

    Raises:
        sqlalchemy.exc.IntegrityError: If the email is already registered
    """
    db_employer = Employer(
        company_name=employer_data.company_name,
        email=employer_data.email,
    )

    db.add(db_employer)
    db.commit()
    db.refresh(db_employer)

    return db_employer


def get_by_id(db: Session, employer_id: UUID) -> Optional[Employer]:
    return db.query(Employer).filter(Employer.id == employer_id).first()


def get_by_email(db: Session, email: str) -> Optional[Employer]:
    return db.query(Employer).filter(Employer.email == email.strip().lower()).first()


def get_multi(db: Session, skip: int = 0, limit: int = 100) -> List[Employer]:
    """Employers, newest first."""
    return (
        db.query(Employer)
        .order_by(Employer.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def search_by_company_name(db: Session, term: str) -> List[Employer]:
    """Case-insensitive substring match on company name; % and _ match literally."""
    return (
        db.query(Employer)
        .filter(Employer.company_name.icontains(term.strip(), autoescape=True))
        .order_by(Employer.company_name)
        .all()
    )


def update(db: Session, employer: Employer, changes: Dict[str, Any]) -> Employer:
    """
    Apply a partial update.

    Args:
        db: Database session
        employer: Employer instance to modify
        changes: Column name -> new value, only for fields the caller sent

    Returns:
        Refreshed Employer instance
    """
    for field, value in changes.items():
        setattr(employer, field, value)

    db.commit()
    db.refresh(employer)

    return employer


def delete(db: Session, employer_id: UUID) -> bool:
    """
    Delete an employer by ID. Jobs posted by the employer are left untouched.

    Returns:
        True if deleted, False if not found
    """
    employer = get_by_id(db, employer_id)
    if not employer:
        return False

    db.delete(employer)
    db.commit()

    return True


def count(db: Session) -> int:
    return db.query(Employer).count()
