"""
Description:
Interview document schemas as stored in the interviews and interview_responses collections.

Dependencies:
- pydantic: Used for data validation and settings management.

"""
from pydantic import BaseModel, Field
from typing import List
from datetime import datetime, timezone

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class Interview(BaseModel):
    roomId: str
    date: str
    time: str
    document: str = ""
    jobTitle: str
    applicantEmail: str
    questions: List[str] = Field(default_factory=list)
    createdAt: datetime = Field(default_factory=_utcnow)

class InterviewResponse(BaseModel):
    roomId: str
    question: str
    response: str
    createdAt: datetime = Field(default_factory=_utcnow)
