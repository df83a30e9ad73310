"""
Test Question Sourcing Module

This module tests where interview questions come from: supplied lists,
model generation, the static fallback banks, and the lazy first-writer-wins
persistence of document questions.

Dependencies:
- pytest: For testing framework
- pytest-asyncio: For async test support
- auriter.services.question_sourcing: The module being tested
- conftest: For the fake generator and in-memory interview repository
"""
import pytest
from auriter.constants.interview_questions import (
    DOCUMENT_FALLBACK_QUESTIONS,
    GENERIC_QUESTIONS,
    NO_DOCUMENT_FALLBACK_QUESTIONS,
    SCHEDULING_FALLBACK_QUESTIONS,
)
from auriter.schemas.interview import Interview
from auriter.services.question_sourcing import GENERATION_FAILED_WARNING, QuestionSourcingService
from conftest import FakeTextGenerator, InMemoryInterviewRepository

GENERATED = '["How do you design a REST API?", "What is an index?", "How do you test async code?"]'


def make_interview(interviews, room_id="room-1", document="Python developer with FastAPI and MongoDB", questions=()):
    interview = Interview(
        roomId=room_id,
        date="2025-03-01",
        time="10:00",
        document=document,
        jobTitle="Backend Engineer",
        applicantEmail="asha@example.test",
        questions=list(questions),
    )
    interviews.create(interview)
    return interview


class TestScheduleQuestions:
    """Test question sourcing when an interview is scheduled."""

    @pytest.mark.asyncio
    async def test_supplied_questions_used_verbatim(self):
        """Test that supplied questions skip generation."""
        generator = FakeTextGenerator(GENERATED)
        service = QuestionSourcingService(generator, InMemoryInterviewRepository())
        sourced = await service.questions_for_schedule("Backend Engineer", "APIs", supplied=["Custom 1", "Custom 2"])
        assert sourced.questions == ["Custom 1", "Custom 2"]
        assert sourced.warning is None
        assert generator.prompts == []

    @pytest.mark.asyncio
    async def test_schedule_generates_from_job(self):
        """Test that the job title and description reach the prompt."""
        generator = FakeTextGenerator(GENERATED)
        service = QuestionSourcingService(generator, InMemoryInterviewRepository())
        sourced = await service.questions_for_schedule("Backend Engineer", "Build APIs")
        assert sourced.questions == ["How do you design a REST API?", "What is an index?", "How do you test async code?"]
        assert "Backend Engineer" in generator.prompts[0]
        assert "Build APIs" in generator.prompts[0]

    @pytest.mark.asyncio
    async def test_schedule_generation_error_uses_fallback_with_warning(self):
        """Test that a generation error falls back with a warning."""
        service = QuestionSourcingService(FakeTextGenerator(RuntimeError("upstream down")), InMemoryInterviewRepository())
        sourced = await service.questions_for_schedule("Backend Engineer", "Build APIs")
        assert sourced.questions == list(SCHEDULING_FALLBACK_QUESTIONS)
        assert sourced.warning == GENERATION_FAILED_WARNING

    @pytest.mark.asyncio
    async def test_schedule_unusable_output_uses_fallback_without_warning(self):
        """Test that unusable output falls back without a warning."""
        service = QuestionSourcingService(FakeTextGenerator("Sorry, no."), InMemoryInterviewRepository())
        sourced = await service.questions_for_schedule("Backend Engineer", "")
        assert sourced.questions == list(SCHEDULING_FALLBACK_QUESTIONS)
        assert sourced.warning is None


class TestInterviewQuestions:
    """Test question sourcing when an interview fetches its questions."""

    @pytest.mark.asyncio
    async def test_stored_questions_are_not_regenerated(self):
        """Test that stored questions are served behind the generic prefix."""
        interviews = InMemoryInterviewRepository()
        interview = make_interview(interviews, questions=["Stored question"])
        generator = FakeTextGenerator(GENERATED)
        questions = await QuestionSourcingService(generator, interviews).questions_for_interview(interview)
        assert questions == [*GENERIC_QUESTIONS, "Stored question"]
        assert generator.prompts == []

    @pytest.mark.asyncio
    async def test_no_document_uses_bank_without_generation(self):
        """Test that interviews without a document use the bank and store nothing."""
        interviews = InMemoryInterviewRepository()
        interview = make_interview(interviews, document="   ")
        generator = FakeTextGenerator(GENERATED)
        questions = await QuestionSourcingService(generator, interviews).questions_for_interview(interview)
        assert questions == [*GENERIC_QUESTIONS, *NO_DOCUMENT_FALLBACK_QUESTIONS]
        assert generator.prompts == []
        assert interviews.question_writes == 0

    @pytest.mark.asyncio
    async def test_generated_questions_persisted_once(self):
        """Test that document questions are generated and stored only once."""
        interviews = InMemoryInterviewRepository()
        make_interview(interviews)
        generator = FakeTextGenerator(GENERATED)
        service = QuestionSourcingService(generator, interviews)

        first = await service.questions_for_interview(interviews.get_by_room_id("room-1"))
        second = await service.questions_for_interview(interviews.get_by_room_id("room-1"))

        assert first == second
        assert first[:5] == list(GENERIC_QUESTIONS)
        assert first[5:] == ["How do you design a REST API?", "What is an index?", "How do you test async code?"]
        assert len(generator.prompts) == 1
        assert interviews.question_writes == 1

    @pytest.mark.asyncio
    async def test_losing_writer_gets_stored_questions(self):
        """Test that two stale readers end up with the first stored list."""
        interviews = InMemoryInterviewRepository()
        make_interview(interviews)
        stale_a = interviews.get_by_room_id("room-1")
        stale_b = interviews.get_by_room_id("room-1")

        first = await QuestionSourcingService(FakeTextGenerator('["A?", "B?", "C?"]'), interviews).technical_questions_for_interview(stale_a)
        second = await QuestionSourcingService(FakeTextGenerator('["X?", "Y?", "Z?"]'), interviews).technical_questions_for_interview(stale_b)

        assert first == second == ["A?", "B?", "C?"]
        assert interviews.question_writes == 1

    @pytest.mark.asyncio
    async def test_generation_error_with_document_is_not_persisted(self):
        """Test that fallback questions after an error are not stored."""
        interviews = InMemoryInterviewRepository()
        interview = make_interview(interviews)
        questions = await QuestionSourcingService(FakeTextGenerator(TimeoutError()), interviews).questions_for_interview(interview)
        assert questions == [*GENERIC_QUESTIONS, *DOCUMENT_FALLBACK_QUESTIONS]
        assert interviews.get_by_room_id("room-1").questions == []

    @pytest.mark.asyncio
    async def test_unusable_output_with_document_is_not_persisted(self):
        """Test that fallback questions after unusable output are not stored."""
        interviews = InMemoryInterviewRepository()
        interview = make_interview(interviews)
        questions = await QuestionSourcingService(FakeTextGenerator("no json"), interviews).technical_questions_for_interview(interview)
        assert questions == list(DOCUMENT_FALLBACK_QUESTIONS)
        assert interviews.question_writes == 0
