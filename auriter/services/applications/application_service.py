"""
Application Service Module

Job application workflows: applicants submit resumes, recruiters review and
move applications through their statuses.

Dependencies:
- fastapi: For UploadFile.
- loguru: For logging operations.
- auriter.repositories: For application, job, user and resume analysis storage.
- auriter.schemas.applications: For request and response models.

"""
import os
import shutil
import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from fastapi import UploadFile
from loguru import logger
from auriter.errors.exceptions import AnalysisNotFound, ApplicationNotFound, BadRequest, Forbidden, JobNotFound
from auriter.repositories.application_repository import ApplicationRepository
from auriter.repositories.job_repository import JobRepository
from auriter.repositories.resume_analysis_repository import ResumeAnalysisRepository
from auriter.repositories.user_repository import UserRepository
from auriter.schemas.applications import (
    ApplicationListResponse,
    ApplicationResponse,
    ApplicationStats,
    ApplicationStatus,
    ApplicationStatusUpdateResponse,
    JobSummary,
    ResumeAnalysisResponse,
    SubmitApplicationResponse,
)
from auriter.schemas.jobs import JobStatus, UserSummary

STATUS_VALUES = {status.value for status in ApplicationStatus}


def compute_stats(applications: Iterable[Dict[str, Any]]) -> ApplicationStats:
    stats = ApplicationStats()
    for application in applications:
        stats.total += 1
        status = application.get("status")
        if status in STATUS_VALUES:
            setattr(stats, status, getattr(stats, status) + 1)
    return stats


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def parse_date_range(date_range: Optional[str]):
    """Parse "start,end" ISO dates. Returns (None, None) when either side is missing."""
    if not date_range:
        return None, None
    start, _, end = date_range.partition(",")
    if not start.strip() or not end.strip():
        return None, None
    try:
        return _as_utc(datetime.fromisoformat(start.strip())), _as_utc(datetime.fromisoformat(end.strip()))
    except ValueError as e:
        raise BadRequest("Invalid date range") from e


class ApplicationService:
    def __init__(self, applications: ApplicationRepository, jobs: JobRepository, users: UserRepository,
                 upload_dir: Optional[str] = None, analyses: Optional[ResumeAnalysisRepository] = None):
        self.applications = applications
        self.analyses = analyses
        self.jobs = jobs
        self.users = users
        self.upload_dir = upload_dir or os.getenv("RESUME_UPLOAD_DIR", os.path.join("uploads", "resumes"))

    def _populate(self, applications: List[Dict[str, Any]], jobs_by_id: Optional[Dict[str, Dict[str, Any]]] = None) -> List[ApplicationResponse]:
        if jobs_by_id is None:
            jobs_by_id = {}
            for job_id in {application["job"] for application in applications}:
                job = self.jobs.get_by_id(job_id)
                if job is not None:
                    jobs_by_id[job_id] = job
        applicants = self.users.get_many(application["applicant"] for application in applications)

        populated = []
        for application in applications:
            job = jobs_by_id.get(application["job"])
            applicant = applicants.get(application["applicant"])
            populated.append(ApplicationResponse(**{
                **application,
                "job": JobSummary(**job) if job else application["job"],
                "applicant": UserSummary(**applicant) if applicant else application["applicant"],
            }))
        return populated

    def _recruiter_jobs(self, recruiter_id: str) -> Dict[str, Dict[str, Any]]:
        return {job["id"]: job for job in self.jobs.list_by_recruiter(recruiter_id)}

    def company_applications(self, recruiter_id: str) -> ApplicationListResponse:
        jobs_by_id = self._recruiter_jobs(recruiter_id)
        applications = self.applications.list_by_jobs(jobs_by_id)
        return ApplicationListResponse(
            applications=self._populate(applications, jobs_by_id),
            stats=compute_stats(applications),
        )

    def search_applications(
        self,
        recruiter_id: str,
        search_term: Optional[str] = None,
        status: Optional[str] = None,
        job_type: Optional[str] = None,
        date_range: Optional[str] = None,
    ) -> ApplicationListResponse:
        """
        Filter the recruiter's applications.

        "all" for status or job type means no filter. The search term matches
        applicant name or email and job title or company, case-insensitively.
        Stats are computed over the filtered result.
        """
        jobs_by_id = self._recruiter_jobs(recruiter_id)
        job_ids = list(jobs_by_id)
        if job_type and job_type != "all":
            job_ids = [job_id for job_id, job in jobs_by_id.items() if job.get("type") == job_type]

        applications = self.applications.list_by_jobs(job_ids)

        if status and status != "all":
            applications = [application for application in applications if application.get("status") == status]

        start, end = parse_date_range(date_range)
        if start and end:
            applications = [
                application for application in applications
                if application.get("createdAt") and start <= _as_utc(application["createdAt"]) <= end
            ]

        populated = self._populate(applications, jobs_by_id)
        if search_term:
            term = search_term.lower()
            populated = [
                application for application in populated
                if any(term in (value or "").lower() for value in (
                    getattr(application.applicant, "name", None),
                    getattr(application.applicant, "email", None),
                    getattr(application.job, "title", None),
                    getattr(application.job, "company", None),
                ))
            ]

        return ApplicationListResponse(
            applications=populated,
            stats=compute_stats(application.model_dump(mode="json") for application in populated),
        )

    def applications_for_job(self, job_id: str, recruiter_id: str) -> List[ApplicationResponse]:
        job = self.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFound(job_id)
        if job.get("recruiter") != recruiter_id:
            raise Forbidden("Not authorized to view applications for this job")
        return self._populate(self.applications.list_by_jobs([job_id]), {job_id: job})

    def user_applications(self, applicant_id: str) -> List[ApplicationResponse]:
        return self._populate(self.applications.list_by_applicant(applicant_id))

    def _store_resume(self, resume: UploadFile, applicant_id: str) -> str:
        extension = os.path.splitext(resume.filename or "")[1]
        file_name = f"{applicant_id}-{int(time.time() * 1000)}{extension}"
        os.makedirs(self.upload_dir, exist_ok=True)
        with open(os.path.join(self.upload_dir, file_name), "wb") as destination:
            shutil.copyfileobj(resume.file, destination)
        return file_name

    def _remove_resume(self, file_name: str):
        path = os.path.join(self.upload_dir, file_name)
        try:
            if os.path.exists(path):
                os.unlink(path)
        except OSError as e:
            logger.warning(f"Error removing uploaded resume {path}: {e}")

    def submit_application(
        self,
        job_id: str,
        applicant_id: str,
        resume: Optional[UploadFile],
        cover_letter: Optional[str] = None,
        additional_notes: Optional[str] = None,
    ) -> SubmitApplicationResponse:
        job = self.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFound(job_id)
        if job.get("status") != JobStatus.ACTIVE.value:
            raise BadRequest("This job is no longer accepting applications")
        if self.applications.find_by_job_and_applicant(job_id, applicant_id) is not None:
            raise BadRequest("You have already applied for this job")
        if resume is None or not resume.filename:
            raise BadRequest("Resume is required")

        file_name = self._store_resume(resume, applicant_id)
        try:
            application = self.applications.create(job_id, applicant_id, file_name, cover_letter, additional_notes)
        except Exception:
            self._remove_resume(file_name)
            raise

        logger.info(f"Application {application['id']} submitted for job {job_id}")
        return SubmitApplicationResponse(application=self._populate([application], {job_id: job})[0])

    def update_status(self, application_id: str, recruiter_id: str, status: str) -> ApplicationStatusUpdateResponse:
        if status not in STATUS_VALUES:
            raise BadRequest("Invalid status value")

        application = self.applications.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFound(application_id)

        job = self.jobs.get_by_id(application["job"])
        if job is None or job.get("recruiter") != recruiter_id:
            raise Forbidden("Not authorized to update this application")

        updated = self.applications.update_status(application_id, status)
        if updated is None:
            raise ApplicationNotFound(application_id)
        logger.info(f"Application {application_id} moved to {status}")

        all_applications = self.applications.list_by_jobs(self._recruiter_jobs(recruiter_id))
        return ApplicationStatusUpdateResponse(
            application=self._populate([updated], {job["id"]: job})[0],
            stats=compute_stats(all_applications),
        )

    def get_application_analysis(self, application_id: str, user_id: str) -> ResumeAnalysisResponse:
        """
        Stored resume analysis for an application.

        Visible to the applicant and to the recruiter who owns the job.

        Raises:
            AnalysisNotFound: If no analysis is stored for the application.
            ApplicationNotFound: If the application does not exist.
            Forbidden: If the user is neither the applicant nor the job's recruiter.
        """
        analysis = self.analyses.get_by_application(application_id) if self.analyses is not None else None
        if analysis is None:
            raise AnalysisNotFound(application_id)

        application = self.applications.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFound(application_id)

        if application["applicant"] != user_id:
            job = self.jobs.get_by_id(application["job"])
            if job is None or job.get("recruiter") != user_id:
                raise Forbidden("Not authorized to view this analysis")

        return ResumeAnalysisResponse(**analysis)
