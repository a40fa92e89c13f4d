"""
Referential validation.

Stored references (job.employer_id, resume.candidate_id, application.*_id)
are not database foreign keys, so every write that introduces one checks the
target exists first. The validator is built with explicit handles to the
entity stores it consults.
"""

import enum
import logging
from types import ModuleType
from typing import Any, Dict, Optional, Union
from uuid import UUID

from sqlalchemy.orm import Session

from jobboard import crud
from jobboard.core.errors import InvalidFormatError, NotFoundError

logger = logging.getLogger(__name__)


class EntityKind(str, enum.Enum):
    EMPLOYER = "employer"
    JOB = "job"
    CANDIDATE = "candidate"
    RESUME = "resume"
    APPLICATION = "application"


def parse_reference_id(value: Union[str, UUID, None], field: str) -> UUID:
    """
    Parse a client-supplied id.

    Raises:
        InvalidFormatError: If value is not a UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value).strip())
    except (TypeError, ValueError):
        raise InvalidFormatError(field) from None


class ReferenceValidator:
    """
    Existence checks against the entity stores.

    Args:
        db: Database session shared with the caller
        stores: EntityKind -> CRUD module exposing ``get_by_id(db, id)``.
            Defaults to the package's CRUD modules.
    """

    def __init__(self, db: Session, stores: Optional[Dict[EntityKind, ModuleType]] = None):
        self.db = db
        self.stores = stores or {
            EntityKind.EMPLOYER: crud.employer,
            EntityKind.JOB: crud.job,
            EntityKind.CANDIDATE: crud.candidate,
            EntityKind.RESUME: crud.resume,
            EntityKind.APPLICATION: crud.application,
        }

    def get(self, kind: EntityKind, entity_id: UUID) -> Optional[Any]:
        return self.stores[kind].get_by_id(self.db, entity_id)

    def exists(self, kind: EntityKind, entity_id: UUID) -> bool:
        return self.get(kind, entity_id) is not None

    def require(self, kind: EntityKind, entity_id: UUID, field: str) -> Any:
        """
        Fetch a referenced record or fail.

        Args:
            kind: Entity kind being referenced
            entity_id: Parsed id
            field: Request field that carried the id, reported back on failure

        Returns:
            The referenced record

        Raises:
            NotFoundError: If no such record exists
        """
        record = self.get(kind, entity_id)
        if record is None:
            logger.info(f"Reference check failed: {kind.value} {entity_id} ({field}) does not exist")
            raise NotFoundError(kind.value, field=field)
        return record

    def resume_belongs_to_candidate(self, resume_id: UUID, candidate_id: UUID) -> bool:
        resume = self.get(EntityKind.RESUME, resume_id)
        return resume is not None and resume.candidate_id == candidate_id
