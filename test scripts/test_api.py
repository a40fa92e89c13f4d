#!/usr/bin/env python3
"""
Smoke test against a running Job Board Platform API.

Walks the whole hiring flow: employer -> job -> candidate -> resume ->
application -> status update, then checks the duplicate guard.

Usage:
    python main.py                      # in another terminal
    python "test scripts/test_api.py"
"""

import sys
import uuid
from typing import Any, Dict, Optional

import requests


API_BASE_URL = "http://localhost:8000"
API_V1 = f"{API_BASE_URL}/api/v1"


def call(method: str, path: str, expected: int, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Send a request and fail loudly on an unexpected status code"""
    url = path if path.startswith("http") else f"{API_V1}{path}"
    try:
        response = requests.request(method, url, json=payload, timeout=10)
    except requests.exceptions.RequestException as e:
        print(f"✗ {method} {url} failed: {e}")
        print(f"  Make sure the API is running on {API_BASE_URL}")
        sys.exit(1)

    if response.status_code != expected:
        print(f"✗ {method} {url}: expected {expected}, got {response.status_code}")
        print(f"  Response: {response.text}")
        sys.exit(1)

    return response.json()


def check_health() -> None:
    print("Checking health endpoint...")
    call("GET", f"{API_BASE_URL}/health", 200)
    print("✓ Health check passed")


def check_hiring_flow() -> None:
    # Unique emails so the script can be re-run against the same database
    run = uuid.uuid4().hex[:8]

    print("\nCreating employer...")
    employer = call("POST", "/employers/", 201, {
        "companyName": "Tech Innovations Inc",
        "email": f"hr+{run}@techinnovations.com",
    })["data"]
    print(f"✓ Employer created: {employer['companyName']} ({employer['id']})")

    print("\nPosting job...")
    job = call("POST", "/jobs/", 201, {
        "title": "Senior Software Developer",
        "description": "Build web applications with Python, FastAPI and PostgreSQL.",
        "location": "San Francisco, CA",
        "salary": 120000,
        "employerId": employer["id"],
    })["data"]
    print(f"✓ Job created: {job['title']} [{job['salaryRange']}]")

    search = call("GET", "/jobs/search?title=software&location=francisco", 200)
    print(f"✓ Job search returned {search['count']} result(s)")

    print("\nRegistering candidate and resume...")
    candidate = call("POST", "/candidates/", 201, {
        "name": "John Doe",
        "email": f"john+{run}@example.com",
    })["data"]
    resume = call("POST", "/resumes/", 201, {
        "candidateId": candidate["id"],
        "fileUrl": "https://files.example.com/john-doe-resume.pdf",
    })["data"]
    print(f"✓ Resume stored ({resume['fileExtension']})")

    print("\nSubmitting application...")
    payload = {"jobId": job["id"], "candidateId": candidate["id"], "resumeId": resume["id"]}
    application = call("POST", "/apply", 201, payload)["data"]
    print(f"✓ Application {application['id']} status: {application['status']}")

    duplicate = call("POST", "/apply", 409, payload)
    assert duplicate["existingApplicationId"] == application["id"]
    print("✓ Duplicate application rejected")

    listing = call("GET", f"/applications/{candidate['id']}", 200)
    print(f"✓ Candidate has {listing['count']} application(s)")

    updated = call("PUT", f"/applications/{application['id']}", 200, {"status": "shortlisted"})["data"]
    assert updated["appliedAt"] == application["appliedAt"]
    print(f"✓ Status updated to {updated['status']} ({updated['statusColor']})")

    invalid = call("PUT", f"/applications/{application['id']}", 400, {"status": "hired"})
    print(f"✓ Invalid status rejected: {invalid['message']}")


def main():
    """Run all checks"""
    print("=" * 60)
    print("JOB BOARD PLATFORM API SMOKE TEST")
    print("=" * 60)

    check_health()
    check_hiring_flow()

    print("\n" + "=" * 60)
    print("✓ ALL CHECKS PASSED!")
    print("=" * 60)
    print(f"\nVisit {API_BASE_URL}/docs for interactive documentation")


if __name__ == "__main__":
    main()
