"""
Description:
Job posting schemas for the jobs API.

Dependencies:
- pydantic: Used for data validation and settings management.
- typing: For type annotations.

"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime
from enum import Enum


class JobStatus(str, Enum):
    """Lifecycle of a job posting."""
    ACTIVE = "active"
    CLOSED = "closed"
    DRAFT = "draft"


class Range(BaseModel):
    min: Optional[int] = Field(default=None, ge=0)
    max: Optional[int] = Field(default=None, ge=0)


class UserSummary(BaseModel):
    """Populated view of a user document (recruiter or applicant)."""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None


class JobCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    company: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    location: Optional[str] = None
    type: Optional[str] = Field(default=None, description="e.g. full-time, part-time, contract, internship")
    skills: List[str] = Field(default_factory=list)
    experience: Optional[Range] = None
    salary: Optional[Range] = None
    status: JobStatus = JobStatus.ACTIVE


class JobUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    company: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = None
    type: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[Range] = None
    salary: Optional[Range] = None
    status: Optional[JobStatus] = None


class JobSearchFilters(BaseModel):
    """Query-string filters accepted by the public job listing."""
    search: Optional[str] = None
    location: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    experienceMin: Optional[int] = None
    experienceMax: Optional[int] = None
    salaryMin: Optional[int] = None
    salaryMax: Optional[int] = None
    skills: Optional[str] = Field(default=None, description="Comma separated, every skill must match")


class JobResponse(BaseModel):
    id: str
    title: str
    company: str
    description: str
    location: Optional[str] = None
    type: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    experience: Optional[Range] = None
    salary: Optional[Range] = None
    status: str
    recruiter: Union[UserSummary, str]
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None


class MessageResponse(BaseModel):
    message: str
