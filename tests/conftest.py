"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Sample employers, candidates, jobs and resumes
"""

import os

# Must be set before the application is imported: settings are read once and
# the module-level engine must not try to reach PostgreSQL.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["JSON_LOGS"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.core.database import Base, get_db
from jobboard.models.candidate import Candidate
from jobboard.models.employer import Employer
from jobboard.models.job import Job
from jobboard.models.resume import Resume
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    All tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def employer(db_session):
    employer = Employer(company_name="Tech Corp", email="hr@techcorp.com")
    db_session.add(employer)
    db_session.commit()
    db_session.refresh(employer)
    return employer


@pytest.fixture
def candidate(db_session):
    candidate = Candidate(name="John Doe", email="john.doe@example.com")
    db_session.add(candidate)
    db_session.commit()
    db_session.refresh(candidate)
    return candidate


@pytest.fixture
def other_candidate(db_session):
    candidate = Candidate(name="Jane Smith", email="jane.smith@example.com")
    db_session.add(candidate)
    db_session.commit()
    db_session.refresh(candidate)
    return candidate


@pytest.fixture
def job(db_session, employer):
    job = Job(
        title="Senior Python Developer",
        description="Build and run backend services with Python and PostgreSQL.",
        location="San Francisco, CA",
        salary=120000,
        employer_id=employer.id,
    )
    db_session.add(job)
    db_session.commit()
    db_session.refresh(job)
    return job


@pytest.fixture
def resume(db_session, candidate):
    resume = Resume(candidate_id=candidate.id, file_url="https://files.example.com/john-doe/resume.pdf")
    db_session.add(resume)
    db_session.commit()
    db_session.refresh(resume)
    return resume


@pytest.fixture
def other_resume(db_session, other_candidate):
    resume = Resume(candidate_id=other_candidate.id, file_url="https://files.example.com/jane/cv.docx")
    db_session.add(resume)
    db_session.commit()
    db_session.refresh(resume)
    return resume


@pytest.fixture
def application_payload(job, candidate, resume):
    """Valid POST /apply body for the sample job, candidate and resume"""
    return {
        "jobId": str(job.id),
        "candidateId": str(candidate.id),
        "resumeId": str(resume.id),
    }


@pytest.fixture
def sample_job_data(employer):
    """Sample job data for testing"""
    return {
        "title": "Backend Engineer",
        "description": "Design and maintain REST APIs for the job board platform.",
        "location": "Remote",
        "salary": 95000,
        "employerId": str(employer.id),
    }
