from .interview import Interview, InterviewResponse
from .schedule_interview import ScheduleInterviewRequest, ScheduleInterviewResponse
from .interview_details import InterviewDetailsResponse, InterviewQuestionsResponse
from .submit_response import SubmitResponseRequest, SubmitResponseResponse
from .analysis import (
    OverallScores,
    CategoryFeedback,
    AnalysisFeedback,
    AnalysisResult,
    AnalyzeResponsesRequest,
    AnalyzeResponsesResponse
)

__all__ = [
    "Interview",
    "InterviewResponse",
    "ScheduleInterviewRequest",
    "ScheduleInterviewResponse",
    "InterviewDetailsResponse",
    "InterviewQuestionsResponse",
    "SubmitResponseRequest",
    "SubmitResponseResponse",
    "OverallScores",
    "CategoryFeedback",
    "AnalysisFeedback",
    "AnalysisResult",
    "AnalyzeResponsesRequest",
    "AnalyzeResponsesResponse"
]
