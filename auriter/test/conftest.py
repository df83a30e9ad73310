"""
Shared Test Fixtures

In-memory stand-ins for the MongoDB repositories, the text generator and the
email sender, wired into the app through dependency_overrides.

Dependencies:
- pytest: For fixtures.
- fastapi.testclient: For the HTTP test client.
- auriter.main: The application under test.
"""
import itertools
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
import pytest
from fastapi.testclient import TestClient
from auriter.core.auth import get_current_user_id
from auriter.core.dependencies import get_application_service, get_interview_service, get_job_service
from auriter.core.route_limiters import limiter
from auriter.errors.exceptions import Unauthorized
from auriter.main import app
from auriter.services.applications.application_service import ApplicationService
from auriter.services.interview.interview_service import InterviewService
from auriter.services.jobs.job_service import JobService

BASE_TIME = datetime(2025, 1, 1, tzinfo=timezone.utc)


class FakeTextGenerator:
    """Returns queued responses in order, repeating the last one. Exceptions are raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts = []

    async def generate_text(self, prompt):
        self.prompts.append(prompt)
        if not self.responses:
            return ""
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


class FakeEmailSender:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    async def send_email(self, to, subject, text, link=None):
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "subject": subject, "text": text, "link": link})


class InMemoryInterviewRepository:
    def __init__(self):
        self.interviews = {}
        self.question_writes = 0

    def create(self, interview):
        self.interviews[interview.roomId] = interview.model_copy(deep=True)
        return interview

    def get_by_room_id(self, room_id):
        interview = self.interviews.get(room_id)
        return interview.model_copy(deep=True) if interview else None

    def set_questions_if_empty(self, room_id, questions):
        interview = self.interviews[room_id]
        if not interview.questions:
            interview.questions = list(questions)
            self.question_writes += 1
        return list(interview.questions)


class InMemoryInterviewResponseRepository:
    def __init__(self):
        self.responses = []

    def create(self, response):
        self.responses.append(response)
        return str(len(self.responses))


class InMemoryJobRepository:
    def __init__(self):
        self.jobs = {}
        self._ids = itertools.count(1)

    def create(self, data, recruiter_id):
        number = next(self._ids)
        created = BASE_TIME + timedelta(minutes=number)
        job = {**data, "id": f"job-{number}", "recruiter": recruiter_id, "createdAt": created, "updatedAt": created}
        job.setdefault("status", "active")
        job.setdefault("skills", [])
        self.jobs[job["id"]] = job
        return dict(job)

    def get_by_id(self, job_id):
        job = self.jobs.get(job_id)
        return dict(job) if job else None

    def _newest_first(self, jobs):
        return [dict(job) for job in sorted(jobs, key=lambda job: job["createdAt"], reverse=True)]

    def search(self, filters):
        status = filters.status or "active"
        jobs = [job for job in self.jobs.values() if job.get("status") == status]
        if filters.search:
            term = filters.search.lower()
            jobs = [job for job in jobs if any(term in (job.get(key) or "").lower() for key in ("title", "company", "description"))]
        if filters.type:
            jobs = [job for job in jobs if job.get("type") == filters.type]
        return self._newest_first(jobs)

    def list_by_recruiter(self, recruiter_id):
        return self._newest_first(job for job in self.jobs.values() if job["recruiter"] == recruiter_id)

    def update_owned(self, job_id, recruiter_id, changes):
        job = self.jobs.get(job_id)
        if job is None or job["recruiter"] != recruiter_id:
            return None
        job.update(changes)
        return dict(job)

    def delete_owned(self, job_id, recruiter_id):
        job = self.jobs.get(job_id)
        if job is None or job["recruiter"] != recruiter_id:
            return False
        del self.jobs[job_id]
        return True


class InMemoryApplicationRepository:
    def __init__(self):
        self.applications = {}
        self._ids = itertools.count(1)

    def create(self, job_id, applicant_id, resume, cover_letter=None, additional_notes=None, created_at=None):
        number = next(self._ids)
        application = {
            "id": f"application-{number}",
            "job": job_id,
            "applicant": applicant_id,
            "resume": resume,
            "coverLetter": cover_letter,
            "additionalNotes": additional_notes,
            "status": "pending",
            "createdAt": created_at or BASE_TIME + timedelta(hours=number),
        }
        self.applications[application["id"]] = application
        return dict(application)

    def get_by_id(self, application_id):
        application = self.applications.get(application_id)
        return dict(application) if application else None

    def find_by_job_and_applicant(self, job_id, applicant_id):
        for application in self.applications.values():
            if application["job"] == job_id and application["applicant"] == applicant_id:
                return dict(application)
        return None

    def _newest_first(self, applications):
        return [dict(a) for a in sorted(applications, key=lambda a: a["createdAt"], reverse=True)]

    def list_by_jobs(self, job_ids):
        job_ids = set(job_ids)
        return self._newest_first(a for a in self.applications.values() if a["job"] in job_ids)

    def list_by_applicant(self, applicant_id):
        return self._newest_first(a for a in self.applications.values() if a["applicant"] == applicant_id)

    def update_status(self, application_id, status):
        application = self.applications.get(application_id)
        if application is None:
            return None
        application["status"] = status
        return dict(application)


class InMemoryResumeAnalysisRepository:
    def __init__(self):
        self.analyses = {}

    def add(self, application_id, **fields):
        analysis = {"id": f"analysis-{len(self.analyses) + 1}", "application": application_id, "createdAt": BASE_TIME, **fields}
        self.analyses[application_id] = analysis
        return dict(analysis)

    def get_by_application(self, application_id):
        analysis = self.analyses.get(application_id)
        return dict(analysis) if analysis else None


class InMemoryUserRepository:
    def __init__(self, users=()):
        self.users = {user["id"]: dict(user) for user in users}

    def get_by_id(self, user_id):
        user = self.users.get(user_id)
        return dict(user) if user else None

    def get_many(self, user_ids):
        return {user_id: dict(self.users[user_id]) for user_id in set(user_ids) if user_id in self.users}


RECRUITER = {"id": "recruiter-1", "name": "Rhea Recruiter", "email": "rhea@acme.test", "company": "Acme"}
OTHER_RECRUITER = {"id": "recruiter-2", "name": "Omar Other", "email": "omar@globex.test", "company": "Globex"}
APPLICANT = {"id": "applicant-1", "name": "Asha Applicant", "email": "asha@example.test"}
SECOND_APPLICANT = {"id": "applicant-2", "name": "Ben Builder", "email": "ben@example.test"}


@pytest.fixture(autouse=True)
def disable_rate_limits():
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def store(tmp_path):
    return SimpleNamespace(
        interviews=InMemoryInterviewRepository(),
        responses=InMemoryInterviewResponseRepository(),
        jobs=InMemoryJobRepository(),
        applications=InMemoryApplicationRepository(),
        users=InMemoryUserRepository([RECRUITER, OTHER_RECRUITER, APPLICANT, SECOND_APPLICANT]),
        analyses=InMemoryResumeAnalysisRepository(),
        generator=FakeTextGenerator(),
        email_sender=FakeEmailSender(),
        upload_dir=str(tmp_path / "resumes"),
        current_user=RECRUITER["id"],
    )


@pytest.fixture
def client(store):
    def interview_service():
        return InterviewService(
            interviews=store.interviews,
            responses=store.responses,
            applications=store.applications,
            jobs=store.jobs,
            users=store.users,
            generator=store.generator,
            email_sender=store.email_sender,
        )

    def current_user():
        if store.current_user is None:
            raise Unauthorized("Not authorized, no token")
        return store.current_user

    app.dependency_overrides[get_interview_service] = interview_service
    app.dependency_overrides[get_job_service] = lambda: JobService(store.jobs, store.users)
    app.dependency_overrides[get_application_service] = lambda: ApplicationService(
        store.applications, store.jobs, store.users, upload_dir=store.upload_dir, analyses=store.analyses
    )
    app.dependency_overrides[get_current_user_id] = current_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def posted_job(store):
    return store.jobs.create(
        {
            "title": "Backend Engineer",
            "company": "Acme",
            "description": "Build APIs with Python and MongoDB.",
            "location": "Remote",
            "type": "full-time",
            "skills": ["python", "mongodb"],
            "status": "active",
        },
        RECRUITER["id"],
    )


@pytest.fixture
def application(store, posted_job):
    return store.applications.create(posted_job["id"], APPLICANT["id"], "applicant-1-1700000000000.pdf")
