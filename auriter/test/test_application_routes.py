"""
Test Application Routes Module

This module tests the job application endpoints: submission with resume
upload, recruiter listings and search, status changes and resume analyses.

Dependencies:
- pytest: For testing framework
- fastapi.testclient: Through the client fixture
- conftest: For in-memory repositories and seeded users
- auriter.routes.job_applications: The routes being tested
"""
import os
import re
import pytest
from conftest import APPLICANT, OTHER_RECRUITER, RECRUITER, SECOND_APPLICANT

RESUME = {"resume": ("cv.pdf", b"%PDF-1.4 resume body", "application/pdf")}


@pytest.fixture
def reviewed_application(store, posted_job):
    application = store.applications.create(posted_job["id"], SECOND_APPLICANT["id"], "applicant-2-1700000000001.pdf")
    store.applications.update_status(application["id"], "reviewed")
    return application


@pytest.fixture
def other_company_application(store):
    job = store.jobs.create({"title": "Designer", "company": "Globex", "description": "UI work", "type": "part-time"}, OTHER_RECRUITER["id"])
    return store.applications.create(job["id"], APPLICANT["id"], "applicant-1-1700000000002.pdf")


class TestSubmitApplication:
    """Test POST /api/applications/{job_id}."""

    def test_submit_stores_resume(self, client, store, posted_job):
        """Test that the resume is saved under a generated name and the application stored."""
        store.current_user = APPLICANT["id"]
        response = client.post(f"/api/applications/{posted_job['id']}", files=RESUME, data={"coverLetter": "Hello"})
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        application = body["application"]
        assert application["status"] == "pending"
        assert application["coverLetter"] == "Hello"
        assert application["job"]["title"] == "Backend Engineer"
        assert re.fullmatch(r"applicant-1-\d+\.pdf", application["resume"])
        with open(os.path.join(store.upload_dir, application["resume"]), "rb") as stored:
            assert stored.read() == b"%PDF-1.4 resume body"

    def test_duplicate_application(self, client, store, application):
        """Test that applying twice to the same job returns 400."""
        store.current_user = APPLICANT["id"]
        response = client.post(f"/api/applications/{application['job']}", files=RESUME)
        assert response.status_code == 400
        assert response.json() == {"detail": "You have already applied for this job"}

    def test_closed_job(self, client, store, posted_job):
        """Test that applying to a closed job returns 400."""
        store.jobs.update_owned(posted_job["id"], RECRUITER["id"], {"status": "closed"})
        store.current_user = APPLICANT["id"]
        assert client.post(f"/api/applications/{posted_job['id']}", files=RESUME).status_code == 400

    def test_unknown_job(self, client, store):
        """Test that applying to an unknown job returns 404."""
        store.current_user = APPLICANT["id"]
        assert client.post("/api/applications/job-404", files=RESUME).status_code == 404

    def test_resume_required(self, client, store, posted_job):
        """Test that a submission without a resume returns 400."""
        store.current_user = APPLICANT["id"]
        response = client.post(f"/api/applications/{posted_job['id']}", data={"coverLetter": "No file"})
        assert response.status_code == 400
        assert response.json() == {"detail": "Resume is required"}

    def test_resume_removed_when_saving_fails(self, client, store, posted_job, monkeypatch):
        """Test that the saved resume is removed when storing the application fails."""
        def fail(*args, **kwargs):
            raise RuntimeError("write concern error")

        monkeypatch.setattr(store.applications, "create", fail)
        store.current_user = APPLICANT["id"]
        response = client.post(f"/api/applications/{posted_job['id']}", files=RESUME)
        assert response.status_code == 500
        assert os.listdir(store.upload_dir) == []


class TestRecruiterListings:
    """Test the recruiter listing and search endpoints."""

    def test_company_applications_with_stats(self, client, application, reviewed_application, other_company_application):
        """Test that a recruiter sees only applications to their jobs, with stats."""
        response = client.get("/api/applications/company")
        assert response.status_code == 200
        body = response.json()
        assert [a["id"] for a in body["applications"]] == [reviewed_application["id"], application["id"]]
        assert body["applications"][0]["applicant"]["name"] == SECOND_APPLICANT["name"]
        assert body["stats"] == {"total": 2, "pending": 1, "reviewed": 1, "shortlisted": 0, "rejected": 0}

    def test_search_by_term(self, client, application, reviewed_application):
        """Test that the search term matches applicant names case-insensitively."""
        body = client.get("/api/applications/search", params={"searchTerm": "BEN"}).json()
        assert [a["id"] for a in body["applications"]] == [reviewed_application["id"]]
        assert body["stats"]["total"] == 1

    def test_search_by_status(self, client, application, reviewed_application):
        """Test that status filters apply and "all" disables them."""
        body = client.get("/api/applications/search", params={"status": "pending"}).json()
        assert [a["id"] for a in body["applications"]] == [application["id"]]

        body = client.get("/api/applications/search", params={"status": "all"}).json()
        assert body["stats"]["total"] == 2

    def test_search_by_job_type(self, client, application):
        """Test that results are filtered by job type."""
        assert client.get("/api/applications/search", params={"jobType": "full-time"}).json()["stats"]["total"] == 1
        assert client.get("/api/applications/search", params={"jobType": "contract"}).json()["applications"] == []

    def test_search_by_date_range(self, client, application, reviewed_application):
        """Test that results are filtered by submission time."""
        body = client.get("/api/applications/search", params={"dateRange": "2025-01-01T01:30:00,2025-01-02T00:00:00"}).json()
        assert [a["id"] for a in body["applications"]] == [reviewed_application["id"]]

    def test_invalid_date_range(self, client, application):
        """Test that an unparseable date range returns 400."""
        assert client.get("/api/applications/search", params={"dateRange": "yesterday,today"}).status_code == 400

    def test_applications_for_own_job(self, client, application):
        """Test that the job owner sees its applications."""
        response = client.get(f"/api/applications/job/{application['job']}")
        assert response.status_code == 200
        assert response.json()[0]["applicant"]["email"] == APPLICANT["email"]

    def test_applications_for_other_recruiters_job(self, client, store, application):
        """Test that another recruiter gets 403."""
        store.current_user = OTHER_RECRUITER["id"]
        assert client.get(f"/api/applications/job/{application['job']}").status_code == 403

    def test_applications_for_unknown_job(self, client):
        """Test that an unknown job returns 404."""
        assert client.get("/api/applications/job/job-404").status_code == 404

    def test_my_applications(self, client, store, application, other_company_application):
        """Test that applicants see their own applications newest first."""
        store.current_user = APPLICANT["id"]
        applications = client.get("/api/applications/my-applications").json()
        assert [a["job"]["company"] for a in applications] == ["Globex", "Acme"]


class TestUpdateStatus:
    """Test PATCH /api/applications/{application_id}/status."""

    def test_update_status(self, client, store, application, reviewed_application):
        """Test that the status changes and fresh stats are returned."""
        response = client.patch(f"/api/applications/{application['id']}/status", json={"status": "shortlisted"})
        assert response.status_code == 200
        body = response.json()
        assert body["application"]["status"] == "shortlisted"
        assert body["stats"] == {"total": 2, "pending": 0, "reviewed": 1, "shortlisted": 1, "rejected": 0}
        assert store.applications.get_by_id(application["id"])["status"] == "shortlisted"

    def test_invalid_status(self, client, application):
        """Test that an unknown status value returns 400."""
        response = client.patch(f"/api/applications/{application['id']}/status", json={"status": "hired"})
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid status value"}

    def test_unknown_application(self, client):
        """Test that an unknown application returns 404."""
        response = client.patch("/api/applications/application-404/status", json={"status": "rejected"})
        assert response.status_code == 404
        assert response.json() == {"detail": "Application not found"}

    def test_other_recruiter_cannot_update(self, client, store, application):
        """Test that another recruiter gets 403 and nothing changes."""
        store.current_user = OTHER_RECRUITER["id"]
        response = client.patch(f"/api/applications/{application['id']}/status", json={"status": "rejected"})
        assert response.status_code == 403
        assert store.applications.get_by_id(application["id"])["status"] == "pending"


class TestApplicationAnalysis:
    """Test GET /api/applications/{application_id}/analysis."""

    @pytest.fixture
    def analysis(self, store, application):
        return store.analyses.add(application["id"], feedback="Strong resume", keyFindings=["Python"], suggestions=["Add metrics"])

    def test_recruiter_sees_analysis(self, client, application, analysis):
        """Test that the job's recruiter can read the analysis."""
        response = client.get(f"/api/applications/{application['id']}/analysis")
        assert response.status_code == 200
        body = response.json()
        assert body["application"] == application["id"]
        assert body["feedback"] == "Strong resume"
        assert body["keyFindings"] == ["Python"]
        assert body["suggestions"] == ["Add metrics"]

    def test_applicant_sees_own_analysis(self, client, store, application, analysis):
        """Test that the applicant can read the analysis of their own application."""
        store.current_user = APPLICANT["id"]
        response = client.get(f"/api/applications/{application['id']}/analysis")
        assert response.status_code == 200
        assert response.json()["id"] == analysis["id"]

    def test_other_users_are_forbidden(self, client, store, application, analysis):
        """Test that other recruiters and applicants get 403."""
        for user in (OTHER_RECRUITER, SECOND_APPLICANT):
            store.current_user = user["id"]
            response = client.get(f"/api/applications/{application['id']}/analysis")
            assert response.status_code == 403
            assert response.json() == {"detail": "Not authorized to view this analysis"}

    def test_missing_analysis(self, client, application):
        """Test that an application without an analysis returns 404."""
        response = client.get(f"/api/applications/{application['id']}/analysis")
        assert response.status_code == 404
        assert response.json() == {"detail": "Analysis not found"}

    def test_analysis_for_missing_application(self, client, store):
        """Test that an analysis whose application is gone returns 404."""
        store.analyses.add("application-404", feedback="Orphaned")
        response = client.get("/api/applications/application-404/analysis")
        assert response.status_code == 404
        assert response.json() == {"detail": "Application not found"}

    def test_requires_auth(self, client, store, application, analysis):
        """Test that an anonymous request returns 401."""
        store.current_user = None
        assert client.get(f"/api/applications/{application['id']}/analysis").status_code == 401
