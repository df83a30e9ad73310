from .application_schemas import (
    ApplicationStatus,
    JobSummary,
    ApplicationResponse,
    ApplicationStats,
    ApplicationListResponse,
    ApplicationStatusUpdate,
    ApplicationStatusUpdateResponse,
    SubmitApplicationResponse,
    ResumeAnalysisResponse
)

__all__ = [
    "ApplicationStatus",
    "JobSummary",
    "ApplicationResponse",
    "ApplicationStats",
    "ApplicationListResponse",
    "ApplicationStatusUpdate",
    "ApplicationStatusUpdateResponse",
    "SubmitApplicationResponse",
    "ResumeAnalysisResponse"
]
