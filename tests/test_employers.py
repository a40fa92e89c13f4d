"""
Test suite for employer endpoints.

Tests cover:
- Employer registration and validation
- Duplicate email handling
- Retrieval, search, update and delete
"""

import uuid


class TestEmployerCreation:
    """Tests for employer creation endpoint"""

    def test_create_employer_success(self, client):
        response = client.post("/api/v1/employers/", json={
            "companyName": "  Acme Robotics  ",
            "email": "Jobs@Acme.io",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Employer created successfully"
        assert body["data"]["companyName"] == "Acme Robotics"
        assert body["data"]["email"] == "jobs@acme.io"
        assert uuid.UUID(body["data"]["id"])
        assert "createdAt" in body["data"]

    def test_create_employer_missing_company_name(self, client):
        response = client.post("/api/v1/employers/", json={"email": "hr@example.com"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] is True
        assert body["field"] == "companyName"
        assert body["message"] == "companyName is required"

    def test_create_employer_invalid_email(self, client):
        response = client.post("/api/v1/employers/", json={
            "companyName": "Acme",
            "email": "not-an-email",
        })

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert body["details"][0]["field"] == "email"

    def test_create_employer_name_too_short(self, client):
        response = client.post("/api/v1/employers/", json={"companyName": "A", "email": "a@example.com"})

        assert response.status_code == 400

    def test_duplicate_email_rejected(self, client, employer):
        response = client.post("/api/v1/employers/", json={
            "companyName": "Another Corp",
            "email": "HR@techcorp.com",
        })

        assert response.status_code == 409
        body = response.json()
        assert body["error"] is True
        assert body["field"] == "email"


class TestEmployerRetrieval:
    """Tests for employer retrieval endpoints"""

    def test_get_employer(self, client, employer):
        response = client.get(f"/api/v1/employers/{employer.id}")

        assert response.status_code == 200
        assert response.json()["data"]["companyName"] == "Tech Corp"

    def test_get_employer_not_found(self, client):
        response = client.get(f"/api/v1/employers/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["message"] == "Employer not found"

    def test_get_employer_invalid_id(self, client):
        response = client.get("/api/v1/employers/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid ID format"

    def test_list_employers(self, client, employer):
        response = client.get("/api/v1/employers/")

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["id"] == str(employer.id)

    def test_search_by_company_name_is_case_insensitive(self, client, employer):
        response = client.get("/api/v1/employers/search", params={"companyName": "tech"})

        assert response.status_code == 200
        assert response.json()["count"] == 1

        response = client.get("/api/v1/employers/search", params={"companyName": "nothing"})
        assert response.json()["count"] == 0

    def test_search_wildcards_match_literally(self, client, employer):
        response = client.get("/api/v1/employers/search", params={"companyName": "_"})
        assert response.json()["count"] == 0

        response = client.get("/api/v1/employers/search", params={"companyName": "%"})
        assert response.json()["count"] == 0


class TestEmployerUpdateAndDelete:
    def test_partial_update(self, client, employer):
        response = client.put(f"/api/v1/employers/{employer.id}", json={"companyName": "Tech Corp International"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["companyName"] == "Tech Corp International"
        assert data["email"] == "hr@techcorp.com"

    def test_update_to_taken_email(self, client, employer, db_session):
        from jobboard.models.employer import Employer

        other = Employer(company_name="Other Inc", email="team@other.com")
        db_session.add(other)
        db_session.commit()

        response = client.put(f"/api/v1/employers/{other.id}", json={"email": "hr@techcorp.com"})

        assert response.status_code == 409

    def test_delete_employer_keeps_jobs(self, client, employer, job):
        response = client.delete(f"/api/v1/employers/{employer.id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(employer.id)

        job_response = client.get(f"/api/v1/jobs/{job.id}")
        assert job_response.status_code == 200
        assert job_response.json()["data"]["employer"] is None

    def test_delete_missing_employer(self, client):
        response = client.delete(f"/api/v1/employers/{uuid.uuid4()}")

        assert response.status_code == 404
