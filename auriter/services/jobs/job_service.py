"""
Job Service Module

Job posting management for recruiters and the public job listing.

Dependencies:
- loguru: For logging operations.
- auriter.repositories: For job and user storage.
- auriter.schemas.jobs: For request and response models.

"""
from typing import Any, Dict, List
from loguru import logger
from auriter.errors.exceptions import JobNotFound
from auriter.repositories.job_repository import JobRepository
from auriter.repositories.user_repository import UserRepository
from auriter.schemas.jobs import JobCreate, JobResponse, JobSearchFilters, JobUpdate, MessageResponse, UserSummary


class JobService:
    def __init__(self, jobs: JobRepository, users: UserRepository):
        self.jobs = jobs
        self.users = users

    def _with_recruiters(self, jobs: List[Dict[str, Any]]) -> List[JobResponse]:
        recruiters = self.users.get_many(job["recruiter"] for job in jobs if job.get("recruiter"))
        populated = []
        for job in jobs:
            recruiter = recruiters.get(job.get("recruiter"))
            populated.append(JobResponse(**{**job, "recruiter": UserSummary(**recruiter) if recruiter else job.get("recruiter", "")}))
        return populated

    def create_job(self, payload: JobCreate, recruiter_id: str) -> JobResponse:
        job = self.jobs.create(payload.model_dump(mode="json"), recruiter_id)
        logger.info(f"Job {job['id']} created by recruiter {recruiter_id}")
        return JobResponse(**job)

    def list_jobs(self, filters: JobSearchFilters) -> List[JobResponse]:
        return self._with_recruiters(self.jobs.search(filters))

    def list_recruiter_jobs(self, recruiter_id: str) -> List[JobResponse]:
        return [JobResponse(**job) for job in self.jobs.list_by_recruiter(recruiter_id)]

    def get_job(self, job_id: str) -> JobResponse:
        job = self.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFound(job_id)
        return self._with_recruiters([job])[0]

    def update_job(self, job_id: str, recruiter_id: str, payload: JobUpdate) -> JobResponse:
        changes = payload.model_dump(mode="json", exclude_unset=True)
        job = self.jobs.update_owned(job_id, recruiter_id, changes)
        if job is None:
            raise JobNotFound(job_id)
        logger.info(f"Job {job_id} updated: {sorted(changes)}")
        return JobResponse(**job)

    def delete_job(self, job_id: str, recruiter_id: str) -> MessageResponse:
        if not self.jobs.delete_owned(job_id, recruiter_id):
            raise JobNotFound(job_id)
        logger.info(f"Job {job_id} deleted by recruiter {recruiter_id}")
        return MessageResponse(message="Job deleted successfully")
