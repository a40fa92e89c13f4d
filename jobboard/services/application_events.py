"""
Observability hooks for the application lifecycle.

The lifecycle manager calls these explicitly around each write. The default
implementation writes log records carrying the application, candidate and job
ids as structured context; the status-change record doubles as the employer
notification.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from jobboard.models.application import Application, ApplicationStatus


def _context(application: Application) -> Dict[str, Any]:
    return {
        "application_id": application.id,
        "candidate_id": application.candidate_id,
        "job_id": application.job_id,
        "status": application.status,
    }


class ApplicationEventLog:
    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def creating(self, candidate_id: UUID, job_id: UUID) -> None:
        self.logger.info(
            f"Creating new application: candidate {candidate_id} applying for job {job_id}",
            extra={"candidate_id": candidate_id, "job_id": job_id},
        )

    def created(self, application: Application) -> None:
        self.logger.info(
            f"Application created successfully: {application.display_info}",
            extra=_context(application),
        )

    def status_changing(self, application_id: UUID, status: ApplicationStatus) -> None:
        self.logger.info(
            f"Application {application_id} status being updated to: {status.value}",
            extra={"application_id": application_id, "status": status},
        )

    def status_changed(self, application: Application) -> None:
        self.logger.info(
            f"NOTIFICATION: application {application.id} status changed to "
            f"\"{getattr(application.status, 'value', application.status)}\" "
            f"(job {application.job_id}, candidate {application.candidate_id})",
            extra=_context(application),
        )
