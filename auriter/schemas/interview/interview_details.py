from pydantic import BaseModel
from typing import List

class InterviewDetailsResponse(BaseModel):
    date: str
    time: str
    jobTitle: str
    document: str

class InterviewQuestionsResponse(BaseModel):
    questions: List[str]
