"""
Description: 
This module defines the request and response schemas for scheduling a mock interview.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

"""
from pydantic import BaseModel, Field
from typing import List, Optional

class ScheduleInterviewRequest(BaseModel):
    applicationId: str = Field(..., min_length=1, description="Application the interview is scheduled for")
    date: str = Field(..., min_length=1)
    time: str = Field(..., min_length=1)
    document: str = Field(default="", description="Resume or job description text used to extract questions")
    questions: Optional[List[str]] = Field(default=None, description="Questions to use verbatim instead of generating them")

class ScheduleInterviewResponse(BaseModel):
    success: bool = True
    message: str = "Interview scheduled successfully!"
    interviewLink: str
    questions: List[str]
    warning: Optional[str] = Field(default=None, description="Set when a side effect degraded, e.g. fallback questions were used")
