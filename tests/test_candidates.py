"""
Unit tests for candidate endpoints.

Tests:
- Candidate registration
- Duplicate emails
- Listing, search, update, delete
"""

import uuid


class TestCandidateCreation:
    def test_create_candidate_success(self, client):
        response = client.post("/api/v1/candidates/", json={
            "name": "Ada Lovelace",
            "email": "ADA@Example.com",
        })

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Ada Lovelace"
        assert data["email"] == "ada@example.com"

    def test_missing_email(self, client):
        response = client.post("/api/v1/candidates/", json={"name": "Ada Lovelace"})

        assert response.status_code == 400
        assert response.json()["field"] == "email"

    def test_duplicate_email(self, client, candidate):
        response = client.post("/api/v1/candidates/", json={
            "name": "Johnny Doe",
            "email": "john.doe@example.com",
        })

        assert response.status_code == 409
        assert response.json()["message"] == "A candidate with this email already exists"


class TestCandidateRetrieval:
    def test_get_candidate(self, client, candidate):
        response = client.get(f"/api/v1/candidates/{candidate.id}")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "John Doe"

    def test_get_unknown_candidate(self, client):
        response = client.get(f"/api/v1/candidates/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["message"] == "Candidate not found"

    def test_list_candidates(self, client, candidate, other_candidate):
        response = client.get("/api/v1/candidates/")

        assert response.status_code == 200
        assert response.json()["count"] == 2

    def test_search_by_name(self, client, candidate, other_candidate):
        response = client.get("/api/v1/candidates/search", params={"name": "JANE"})

        assert response.status_code == 200
        body = response.json()
        assert body["count"] == 1
        assert body["data"][0]["name"] == "Jane Smith"


class TestCandidateUpdateAndDelete:
    def test_update_name(self, client, candidate):
        response = client.put(f"/api/v1/candidates/{candidate.id}", json={"name": "John A. Doe"})

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "John A. Doe"

    def test_update_email_to_own_email_is_allowed(self, client, candidate):
        response = client.put(f"/api/v1/candidates/{candidate.id}", json={"email": "John.Doe@example.com"})

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "john.doe@example.com"

    def test_delete_candidate(self, client, candidate):
        response = client.delete(f"/api/v1/candidates/{candidate.id}")

        assert response.status_code == 200
        assert client.get(f"/api/v1/candidates/{candidate.id}").status_code == 404
