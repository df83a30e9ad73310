"""
Interview Routes Module

Endpoints for the mock-interview workflow: a recruiter schedules an interview
for an application, the applicant's interview room loads details and
questions, submits answers one by one, and finally requests an AI analysis.

Dependencies:
- fastapi: For API routing and dependency injection.
- loguru: For logging operations.
- auriter.core.route_limiters: For rate limiting.
- auriter.core.dependencies: For the interview service.
- auriter.errors.exceptions: For custom exception handling.
- auriter.schemas.interview: For request and response models.

"""
from fastapi import APIRouter, Depends, HTTPException, Request
from loguru import logger
from auriter.core.dependencies import get_interview_service
from auriter.core.route_limiters import limiter
from auriter.errors.exceptions import InternalServerError
from auriter.schemas.interview import (
    AnalyzeResponsesRequest,
    AnalyzeResponsesResponse,
    InterviewDetailsResponse,
    InterviewQuestionsResponse,
    ScheduleInterviewRequest,
    ScheduleInterviewResponse,
    SubmitResponseRequest,
    SubmitResponseResponse,
)
from auriter.services.interview.interview_service import InterviewService

router = APIRouter(
    prefix="/api/interview",
    tags=["interview"],
    responses={404: {"description": "Not found"}}
)

@router.post("/schedule", response_model=ScheduleInterviewResponse, response_model_exclude_none=True)
@limiter.limit("5/minute")
async def schedule_interview_route(
    request: Request,
    payload: ScheduleInterviewRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Schedule an interview for an application and email the invitation.

    Raises:
        NotFound: If the application, its job or its applicant does not exist.
        InternalServerError: If storing the interview or sending the email fails.

    Rate Limit:
        5 requests per minute per client
    """
    try:
        return await service.schedule_interview(payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in schedule interview endpoint")
        raise InternalServerError("Failed to schedule interview") from e

@router.get("/details/{room_id}", response_model=InterviewDetailsResponse)
def get_interview_details_route(room_id: str, service: InterviewService = Depends(get_interview_service)):
    try:
        return service.get_interview_details(room_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in interview details endpoint")
        raise InternalServerError("Failed to fetch interview details") from e

@router.get("/questions/{room_id}", response_model=InterviewQuestionsResponse)
async def get_interview_questions_route(room_id: str, service: InterviewService = Depends(get_interview_service)):
    """Generic behavioural questions followed by the interview's technical questions."""
    try:
        return await service.get_interview_questions(room_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in interview questions endpoint")
        raise InternalServerError("Failed to fetch interview questions") from e

@router.post("/response/{room_id}", response_model=SubmitResponseResponse)
def submit_response_route(
    room_id: str,
    payload: SubmitResponseRequest,
    service: InterviewService = Depends(get_interview_service),
):
    try:
        return service.submit_response(room_id, payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in submit response endpoint")
        raise InternalServerError("Failed to submit response") from e

@router.post("/analyze", response_model=AnalyzeResponsesResponse, response_model_exclude_none=True)
async def analyze_responses_route(
    payload: AnalyzeResponsesRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Score the interview answers.

    Malformed model output never fails this endpoint; the analysis is
    repaired to a complete result.
    """
    try:
        return await service.analyze_responses(payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unhandled exception in analyze responses endpoint")
        raise InternalServerError("Failed to analyze responses") from e
