"""
FastAPI dependency providers.

Each route receives its service through Depends so tests can swap in
in-memory collaborators with app.dependency_overrides.
"""
from fastapi import Depends
from pymongo.database import Database
from auriter.core.text_generator import ChatCompletionTextGenerator, TextGenerator
from auriter.database import get_database
from auriter.repositories.application_repository import ApplicationRepository
from auriter.repositories.interview_repository import InterviewRepository, InterviewResponseRepository
from auriter.repositories.job_repository import JobRepository
from auriter.repositories.resume_analysis_repository import ResumeAnalysisRepository
from auriter.repositories.user_repository import UserRepository
from auriter.services.applications.application_service import ApplicationService
from auriter.services.email.email_service import EmailSender, SmtpEmailSender
from auriter.services.interview.interview_service import InterviewService
from auriter.services.jobs.job_service import JobService
from auriter.services.speech_relay import SpeechRelayClient


def get_db() -> Database:
    return get_database()


def get_text_generator() -> TextGenerator:
    return ChatCompletionTextGenerator("question_generation")


def get_analysis_generator() -> TextGenerator:
    return ChatCompletionTextGenerator("response_analysis")


def get_email_sender() -> EmailSender:
    return SmtpEmailSender()


def get_interview_service(
    db: Database = Depends(get_db),
    generator: TextGenerator = Depends(get_text_generator),
    analysis_generator: TextGenerator = Depends(get_analysis_generator),
    email_sender: EmailSender = Depends(get_email_sender),
) -> InterviewService:
    return InterviewService(
        interviews=InterviewRepository(db),
        responses=InterviewResponseRepository(db),
        applications=ApplicationRepository(db),
        jobs=JobRepository(db),
        users=UserRepository(db),
        generator=generator,
        email_sender=email_sender,
        analysis_generator=analysis_generator,
    )


def get_job_service(db: Database = Depends(get_db)) -> JobService:
    return JobService(JobRepository(db), UserRepository(db))


def get_application_service(db: Database = Depends(get_db)) -> ApplicationService:
    return ApplicationService(
        ApplicationRepository(db), JobRepository(db), UserRepository(db), analyses=ResumeAnalysisRepository(db)
    )


def get_speech_relay_factory():
    return SpeechRelayClient
