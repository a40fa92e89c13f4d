"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from jobboard.crud import employer, job, candidate, resume, application

__all__ = ["employer", "job", "candidate", "resume", "application"]
