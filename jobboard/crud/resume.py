"""
CRUD operations for Resume model.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session, joinedload
from jobboard.models.resume import Resume


def _with_candidate(query):
    return query.options(joinedload(Resume.candidate))


def create(db: Session, candidate_id: UUID, file_url: str) -> Resume:
    """
    Create a resume record for a candidate the caller has already verified.
    """
    db_resume = Resume(candidate_id=candidate_id, file_url=file_url)

    db.add(db_resume)
    db.commit()
    db.refresh(db_resume)

    return db_resume


def get_by_id(db: Session, resume_id: UUID) -> Optional[Resume]:
    return _with_candidate(db.query(Resume)).filter(Resume.id == resume_id).first()


def get_multi(db: Session, skip: int = 0, limit: int = 100) -> List[Resume]:
    return (
        _with_candidate(db.query(Resume))
        .order_by(Resume.created_at.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def get_by_candidate(db: Session, candidate_id: UUID) -> List[Resume]:
    return (
        _with_candidate(db.query(Resume))
        .filter(Resume.candidate_id == candidate_id)
        .order_by(Resume.created_at.desc())
        .all()
    )


def get_recent(db: Session, limit: int = 10) -> List[Resume]:
    """Most recently uploaded resumes."""
    return get_multi(db, skip=0, limit=limit)


def delete(db: Session, resume_id: UUID) -> bool:
    """
    Delete a resume by ID. Applications submitted with it keep the reference.

    Returns:
        True if deleted, False if not found
    """
    resume = get_by_id(db, resume_id)
    if not resume:
        return False

    db.delete(resume)
    db.commit()

    return True


def count(db: Session) -> int:
    return db.query(Resume).count()
