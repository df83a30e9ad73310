"""
Job Application Routes Module

Applicants submit resumes to jobs; recruiters list, search and review the
applications to their own jobs.

Dependencies:
- fastapi: For API routing, multipart form handling and dependency injection.
- loguru: For logging operations.
- auriter.core.auth: For the acting user.
- auriter.core.dependencies: For the application service.
- auriter.schemas.applications: For request and response models.

"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from loguru import logger
from starlette.status import HTTP_201_CREATED
from auriter.core.auth import get_current_user_id
from auriter.core.dependencies import get_application_service
from auriter.errors.exceptions import InternalServerError
from auriter.schemas.applications import (
    ApplicationListResponse,
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplicationStatusUpdateResponse,
    ResumeAnalysisResponse,
    SubmitApplicationResponse,
)
from auriter.services.applications.application_service import ApplicationService

router = APIRouter(
    prefix="/api/applications",
    tags=["applications"],
    responses={404: {"description": "Not found"}}
)

@router.get("/company", response_model=ApplicationListResponse)
def company_applications_route(
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """All applications to the acting recruiter's jobs, with status counts."""
    try:
        return service.company_applications(user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in company applications endpoint")
        raise InternalServerError("Failed to fetch applications") from e

@router.get("/search", response_model=ApplicationListResponse)
def search_applications_route(
    searchTerm: Optional[str] = None,
    status: Optional[str] = None,
    jobType: Optional[str] = None,
    dateRange: Optional[str] = None,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    try:
        return service.search_applications(user_id, searchTerm, status, jobType, dateRange)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in search applications endpoint")
        raise InternalServerError("Failed to search applications") from e

@router.get("/job/{job_id}", response_model=List[ApplicationResponse])
def job_applications_route(
    job_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    try:
        return service.applications_for_job(job_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in job applications endpoint")
        raise InternalServerError("Failed to fetch applications") from e

@router.get("/my-applications", response_model=List[ApplicationResponse])
def my_applications_route(
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    try:
        return service.user_applications(user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in my applications endpoint")
        raise InternalServerError("Failed to fetch applications") from e

@router.post("/{job_id}", response_model=SubmitApplicationResponse, status_code=HTTP_201_CREATED)
def submit_application_route(
    job_id: str,
    resume: Optional[UploadFile] = File(default=None),
    coverLetter: Optional[str] = Form(default=None),
    additionalNotes: Optional[str] = Form(default=None),
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Submit an application with a resume file (multipart/form-data).

    Raises:
        NotFound: If the job does not exist.
        BadRequest: If the job is not active, the user already applied, or no resume was sent.
    """
    try:
        return service.submit_application(job_id, user_id, resume, coverLetter, additionalNotes)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in submit application endpoint")
        raise InternalServerError("Failed to submit application") from e

@router.patch("/{application_id}/status", response_model=ApplicationStatusUpdateResponse)
def update_application_status_route(
    application_id: str,
    payload: ApplicationStatusUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    try:
        return service.update_status(application_id, user_id, payload.status)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in update application status endpoint")
        raise InternalServerError("Failed to update application status") from e

@router.get("/{application_id}/analysis", response_model=ResumeAnalysisResponse)
def application_analysis_route(
    application_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Stored resume analysis, visible to the applicant and the job's recruiter."""
    try:
        return service.get_application_analysis(application_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in application analysis endpoint")
        raise InternalServerError("Failed to fetch application analysis") from e
