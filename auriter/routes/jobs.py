"""
Job Routes Module

Public job listing plus recruiter-owned job management.

Dependencies:
- fastapi: For API routing and dependency injection.
- loguru: For logging operations.
- auriter.core.auth: For the acting user.
- auriter.core.dependencies: For the job service.
- auriter.schemas.jobs: For request and response models.

"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from starlette.status import HTTP_201_CREATED
from auriter.core.auth import get_current_user_id
from auriter.core.dependencies import get_job_service
from auriter.errors.exceptions import InternalServerError
from auriter.schemas.jobs import JobCreate, JobResponse, JobSearchFilters, JobUpdate, MessageResponse
from auriter.services.jobs.job_service import JobService

router = APIRouter(
    prefix="/api/jobs",
    tags=["jobs"],
    responses={404: {"description": "Not found"}}
)

@router.post("/", response_model=JobResponse, status_code=HTTP_201_CREATED)
def create_job_route(
    payload: JobCreate,
    user_id: str = Depends(get_current_user_id),
    service: JobService = Depends(get_job_service),
):
    try:
        return service.create_job(payload, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in create job endpoint")
        raise InternalServerError("Failed to create job") from e

@router.get("/", response_model=List[JobResponse])
def list_jobs_route(
    search: Optional[str] = None,
    location: Optional[str] = None,
    type: Optional[str] = None,
    status: Optional[str] = None,
    experienceMin: Optional[int] = Query(default=None, ge=0),
    experienceMax: Optional[int] = Query(default=None, ge=0),
    salaryMin: Optional[int] = Query(default=None, ge=0),
    salaryMax: Optional[int] = Query(default=None, ge=0),
    skills: Optional[str] = None,
    service: JobService = Depends(get_job_service),
):
    """List jobs, newest first. Only active jobs unless a status is given."""
    filters = JobSearchFilters(
        search=search,
        location=location,
        type=type,
        status=status,
        experienceMin=experienceMin,
        experienceMax=experienceMax,
        salaryMin=salaryMin,
        salaryMax=salaryMax,
        skills=skills,
    )
    try:
        return service.list_jobs(filters)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in list jobs endpoint")
        raise InternalServerError("Failed to fetch jobs") from e

# Declared before /{job_id} so "my-jobs" is not taken for an id
@router.get("/my-jobs", response_model=List[JobResponse])
def my_jobs_route(
    user_id: str = Depends(get_current_user_id),
    service: JobService = Depends(get_job_service),
):
    try:
        return service.list_recruiter_jobs(user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in my jobs endpoint")
        raise InternalServerError("Failed to fetch jobs") from e

@router.get("/{job_id}", response_model=JobResponse)
def get_job_route(job_id: str, service: JobService = Depends(get_job_service)):
    try:
        return service.get_job(job_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in get job endpoint")
        raise InternalServerError("Failed to fetch job") from e

@router.patch("/{job_id}", response_model=JobResponse)
def update_job_route(
    job_id: str,
    payload: JobUpdate,
    user_id: str = Depends(get_current_user_id),
    service: JobService = Depends(get_job_service),
):
    """Update a job. Jobs owned by someone else are reported as not found."""
    try:
        return service.update_job(job_id, user_id, payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in update job endpoint")
        raise InternalServerError("Failed to update job") from e

@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job_route(
    job_id: str,
    user_id: str = Depends(get_current_user_id),
    service: JobService = Depends(get_job_service),
):
    try:
        return service.delete_job(job_id, user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in delete job endpoint")
        raise InternalServerError("Failed to delete job") from e
