from .job_schemas import (
    JobStatus,
    Range,
    UserSummary,
    JobCreate,
    JobUpdate,
    JobSearchFilters,
    JobResponse,
    MessageResponse
)

__all__ = [
    "JobStatus",
    "Range",
    "UserSummary",
    "JobCreate",
    "JobUpdate",
    "JobSearchFilters",
    "JobResponse",
    "MessageResponse"
]
