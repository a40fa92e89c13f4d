"""
FastAPI dependencies that assemble request-scoped services.

Each request gets its own database session; the services built here share
that session so a lifecycle operation and its reference checks see the same
transaction.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from jobboard.core.database import get_db
from jobboard.services.applications import ApplicationLifecycleManager
from jobboard.services.references import ReferenceValidator


def get_reference_validator(db: Session = Depends(get_db)) -> ReferenceValidator:
    return ReferenceValidator(db)


def get_application_manager(
    db: Session = Depends(get_db),
    references: ReferenceValidator = Depends(get_reference_validator),
) -> ApplicationLifecycleManager:
    """Lifecycle manager wired to the request's session and validator."""
    return ApplicationLifecycleManager(db, references)
