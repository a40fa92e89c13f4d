"""
Database models package.
"""

from jobboard.models.employer import Employer
from jobboard.models.job import Job
from jobboard.models.candidate import Candidate
from jobboard.models.resume import Resume
from jobboard.models.application import Application, ApplicationStatus

__all__ = ["Employer", "Job", "Candidate", "Resume", "Application", "ApplicationStatus"]
