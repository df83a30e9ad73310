"""
Description:
Job application schemas for the applications API.

Dependencies:
- pydantic: Used for data validation and settings management.
- typing: For type annotations.

"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime
from enum import Enum
from auriter.schemas.jobs.job_schemas import UserSummary


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    REJECTED = "rejected"


class JobSummary(BaseModel):
    """Populated view of the job an application belongs to."""
    id: str
    title: Optional[str] = None
    company: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None


class ApplicationResponse(BaseModel):
    id: str
    job: Union[JobSummary, str]
    applicant: Union[UserSummary, str]
    resume: str
    coverLetter: Optional[str] = None
    additionalNotes: Optional[str] = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    createdAt: Optional[datetime] = None


class ApplicationStats(BaseModel):
    total: int = 0
    pending: int = 0
    reviewed: int = 0
    shortlisted: int = 0
    rejected: int = 0


class ApplicationListResponse(BaseModel):
    applications: List[ApplicationResponse]
    stats: ApplicationStats


class ApplicationStatusUpdate(BaseModel):
    # Checked against ApplicationStatus in the service so a bad value is a 400
    status: str = Field(..., min_length=1)


class ApplicationStatusUpdateResponse(BaseModel):
    application: ApplicationResponse
    stats: ApplicationStats


class SubmitApplicationResponse(BaseModel):
    success: bool = True
    application: ApplicationResponse


class ResumeAnalysisResponse(BaseModel):
    """Stored resume analysis for an application. Produced elsewhere; read-only here."""
    id: str
    application: str
    feedback: Optional[str] = None
    keyFindings: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    createdAt: Optional[datetime] = None
