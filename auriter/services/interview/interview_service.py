"""
Interview Service Module

Orchestrates the mock-interview workflow: scheduling, question delivery,
answer collection and AI analysis of the finished interview.

Question sourcing and analysis repair never fail the caller on bad model
output. Missing interviews and applications always surface as NotFound.
Scheduling awaits the invitation email, so a delivery failure aborts the
request after the interview has been stored.

Dependencies:
- loguru: For logging operations.
- starlette.concurrency: For running blocking MongoDB calls off the event loop.
- auriter.repositories: For interview, application, job and user storage.
- auriter.services.question_sourcing: For choosing interview questions.
- auriter.services.response_repair: For repairing analysis output.
- auriter.services.email.email_service: For the invitation email.
- auriter.services.video_room.room_provisioner: For room tokens and links.

"""
from typing import Optional
from loguru import logger
from starlette.concurrency import run_in_threadpool
from auriter.constants.analysis_defaults import ANALYSIS_UNAVAILABLE_FOCUS_AREAS, ANALYSIS_UNAVAILABLE_PLACEHOLDER
from auriter.core.prompt_templates import ANALYSIS_PROMPT, format_interview_data
from auriter.core.text_generator import TextGenerator
from auriter.errors.exceptions import ApplicationNotFound, InterviewNotFound, JobNotFound
from auriter.repositories.application_repository import ApplicationRepository
from auriter.repositories.interview_repository import InterviewRepository, InterviewResponseRepository
from auriter.repositories.job_repository import JobRepository
from auriter.repositories.user_repository import UserRepository
from auriter.schemas.interview import (
    AnalyzeResponsesRequest,
    AnalyzeResponsesResponse,
    Interview,
    InterviewDetailsResponse,
    InterviewQuestionsResponse,
    InterviewResponse,
    ScheduleInterviewRequest,
    ScheduleInterviewResponse,
    SubmitResponseRequest,
    SubmitResponseResponse,
)
from auriter.services.email.email_service import EmailSender
from auriter.services.question_sourcing import QuestionSourcingService
from auriter.services.response_repair import default_analysis, repair_analysis_result
from auriter.services.video_room.room_provisioner import build_interview_link, create_room_id

ANALYSIS_FAILED_WARNING = "Interview analysis is unavailable; default feedback was returned."


class InterviewService:
    def __init__(
        self,
        interviews: InterviewRepository,
        responses: InterviewResponseRepository,
        applications: ApplicationRepository,
        jobs: JobRepository,
        users: UserRepository,
        generator: TextGenerator,
        email_sender: EmailSender,
        analysis_generator: Optional[TextGenerator] = None,
    ):
        self.interviews = interviews
        self.responses = responses
        self.applications = applications
        self.jobs = jobs
        self.users = users
        self.generator = generator
        self.email_sender = email_sender
        self.analysis_generator = analysis_generator or generator
        self.question_sourcing = QuestionSourcingService(generator, interviews)

    def _get_interview(self, room_id: str) -> Interview:
        interview = self.interviews.get_by_room_id(room_id)
        if interview is None:
            logger.error(f"Interview not found for room ID: {room_id}")
            raise InterviewNotFound(room_id)
        return interview

    def _application_parties(self, application_id: str):
        """Job and applicant behind an application."""
        application = self.applications.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFound(application_id)
        job = self.jobs.get_by_id(application["job"])
        if job is None:
            raise JobNotFound(application["job"])
        applicant = self.users.get_by_id(application["applicant"])
        if applicant is None or not applicant.get("email"):
            raise ApplicationNotFound(application_id)
        return job, applicant

    async def schedule_interview(self, request: ScheduleInterviewRequest) -> ScheduleInterviewResponse:
        logger.info(f"[Schedule Interview] Request received for application {request.applicationId}")

        job, applicant = await run_in_threadpool(self._application_parties, request.applicationId)

        room_id = create_room_id()
        interview_link = build_interview_link(room_id)

        sourced = await self.question_sourcing.questions_for_schedule(
            job_title=job["title"],
            job_description=job.get("description", ""),
            supplied=request.questions,
        )

        interview = Interview(
            roomId=room_id,
            date=request.date,
            time=request.time,
            document=request.document,
            jobTitle=job["title"],
            applicantEmail=applicant["email"],
            questions=sourced.questions,
        )
        await run_in_threadpool(self.interviews.create, interview)

        await self.email_sender.send_email(
            to=applicant["email"],
            subject="Mock Interview Invitation",
            text=(
                f"You have been invited for a mock interview for the position of {job['title']}. "
                f"Please join the room on {request.date} at {request.time}."
            ),
            link=interview_link,
        )

        logger.info(f"[Schedule Interview] Interview {room_id} scheduled for {applicant['email']}")
        return ScheduleInterviewResponse(
            interviewLink=interview_link,
            questions=sourced.questions,
            warning=sourced.warning,
        )

    def get_interview_details(self, room_id: str) -> InterviewDetailsResponse:
        interview = self._get_interview(room_id)
        return InterviewDetailsResponse(
            date=interview.date,
            time=interview.time,
            jobTitle=interview.jobTitle,
            document=interview.document,
        )

    async def get_interview_questions(self, room_id: str) -> InterviewQuestionsResponse:
        interview = await run_in_threadpool(self._get_interview, room_id)
        questions = await self.question_sourcing.questions_for_interview(interview)
        logger.info(f"[Get Interview Questions] Returning {len(questions)} questions for {room_id}")
        return InterviewQuestionsResponse(questions=questions)

    def submit_response(self, room_id: str, request: SubmitResponseRequest) -> SubmitResponseResponse:
        self._get_interview(room_id)
        self.responses.create(InterviewResponse(roomId=room_id, question=request.question, response=request.response))
        logger.info(f"[Submit Response] Response saved for room ID: {room_id}")
        return SubmitResponseResponse()

    async def analyze_responses(self, request: AnalyzeResponsesRequest) -> AnalyzeResponsesResponse:
        """
        Score a finished interview.

        The model output always goes through the repair pipeline, so the
        result is complete however malformed the output. If the generation
        call itself fails, the "analysis unavailable" default is returned with
        a warning.

        Args:
            request (AnalyzeResponsesRequest): Questions asked and answers given, in order.

        Returns:
            AnalyzeResponsesResponse: A complete analysis and an optional warning.
        """
        try:
            prompt = ANALYSIS_PROMPT.render(interview_data=format_interview_data(request.questions, request.answers))
            content = await self.analysis_generator.generate_text(prompt)
        except Exception as e:
            logger.error(f"Analysis Error for room {request.roomId}: {e}")
            return AnalyzeResponsesResponse(
                analysis=default_analysis(ANALYSIS_UNAVAILABLE_PLACEHOLDER, ANALYSIS_UNAVAILABLE_FOCUS_AREAS),
                warning=ANALYSIS_FAILED_WARNING,
            )

        result = repair_analysis_result(content)
        logger.info(f"Analysis for room {request.roomId} completed with status {result.status.value}")
        return AnalyzeResponsesResponse(analysis=result.value)
