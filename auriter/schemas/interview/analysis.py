"""
Description: 
This module defines the schemas for analysing a completed mock interview.

The analysis structure always carries all three score categories and all three
feedback categories; the response repair pipeline back-fills anything the
model leaves out.

Dependencies:
- pydantic: For data validation and settings management.
- typing: For type annotations.

"""
from pydantic import BaseModel, Field
from typing import List, Optional

class OverallScores(BaseModel):
    selfIntroduction: int = Field(ge=1, le=10, description="Self introduction score between 1 and 10")
    projectExplanation: int = Field(ge=1, le=10, description="Project explanation score between 1 and 10")
    englishCommunication: int = Field(ge=1, le=10, description="English communication score between 1 and 10")

class CategoryFeedback(BaseModel):
    strengths: str
    areasOfImprovement: str

class AnalysisFeedback(BaseModel):
    selfIntroduction: CategoryFeedback
    projectExplanation: CategoryFeedback
    englishCommunication: CategoryFeedback

class AnalysisResult(BaseModel):
    overallScores: OverallScores
    feedback: AnalysisFeedback
    focusAreas: List[str] = Field(..., min_length=1, description="Improvement areas ordered by priority")

class AnalyzeResponsesRequest(BaseModel):
    roomId: Optional[str] = None
    questions: List[str] = Field(..., min_length=1)
    answers: List[str]

class AnalyzeResponsesResponse(BaseModel):
    analysis: AnalysisResult
    warning: Optional[str] = None
