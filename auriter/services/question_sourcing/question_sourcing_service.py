"""
Question Sourcing Service Module

Decides where an interview's questions come from: the recruiter, the language
model, or a static bank. Both entry points are total; any failure of the
generation call is absorbed into a fallback bank.

Dependencies:
- loguru: For logging operations.
- starlette.concurrency: For running blocking MongoDB calls off the event loop.
- auriter.core.text_generator: For the TextGenerator interface.
- auriter.core.prompt_templates: For the question prompts.
- auriter.services.response_repair: For repairing model output.
- auriter.repositories.interview_repository: For persisting generated questions.
- auriter.constants.interview_questions: For the static question banks.

"""
from dataclasses import dataclass
from typing import List, Optional, Sequence
from loguru import logger
from starlette.concurrency import run_in_threadpool
from auriter.constants.interview_questions import (
    DOCUMENT_FALLBACK_QUESTIONS,
    GENERIC_QUESTIONS,
    NO_DOCUMENT_FALLBACK_QUESTIONS,
    SCHEDULING_FALLBACK_QUESTIONS,
)
from auriter.core.prompt_templates import DOCUMENT_QUESTIONS_PROMPT, TECHNICAL_QUESTIONS_PROMPT
from auriter.core.text_generator import TextGenerator
from auriter.repositories.interview_repository import InterviewRepository
from auriter.schemas.interview import Interview
from auriter.services.response_repair import repair_question_list_result

GENERATION_FAILED_WARNING = "Question generation is unavailable; default questions were used."


@dataclass
class SourcedQuestions:
    questions: List[str]
    warning: Optional[str] = None


class QuestionSourcingService:
    def __init__(self, generator: TextGenerator, interviews: InterviewRepository):
        self.generator = generator
        self.interviews = interviews

    async def questions_for_schedule(
        self,
        job_title: str,
        job_description: str,
        supplied: Optional[Sequence[str]] = None,
    ) -> SourcedQuestions:
        """
        Pick the technical questions stored with a newly scheduled interview.

        Supplied questions are used verbatim. Otherwise five questions are
        generated from the job title and description.

        Args:
            job_title (str): Title of the job applied for.
            job_description (str): Description of the job applied for.
            supplied (Optional[Sequence[str]]): Questions given by the recruiter.

        Returns:
            SourcedQuestions: A non-empty question list, with a warning when the
                generation call failed and the fallback bank was used.
        """
        if supplied:
            return SourcedQuestions(list(supplied))

        try:
            prompt = TECHNICAL_QUESTIONS_PROMPT.render(job_title=job_title, job_description=job_description or "")
            content = await self.generator.generate_text(prompt)
        except Exception as e:
            logger.error(f"[Schedule Interview] Error generating questions: {e}")
            return SourcedQuestions(list(SCHEDULING_FALLBACK_QUESTIONS), GENERATION_FAILED_WARNING)

        result = repair_question_list_result(content, fallback=SCHEDULING_FALLBACK_QUESTIONS)
        return SourcedQuestions(result.value)

    async def technical_questions_for_interview(self, interview: Interview) -> List[str]:
        """
        Technical questions for an interview, generating and storing them on first use.

        Args:
            interview (Interview): The stored interview.

        Returns:
            List[str]: Stored questions, newly generated ones, or a fallback bank.
        """
        if interview.questions:
            logger.info(f"[Get Interview Questions] Using {len(interview.questions)} stored questions for {interview.roomId}")
            return list(interview.questions)

        if not interview.document or not interview.document.strip():
            return list(NO_DOCUMENT_FALLBACK_QUESTIONS)

        try:
            prompt = DOCUMENT_QUESTIONS_PROMPT.render(document=interview.document)
            content = await self.generator.generate_text(prompt)
        except Exception as e:
            logger.error(f"[Get Interview Questions] Error generating questions: {e}")
            return list(DOCUMENT_FALLBACK_QUESTIONS)

        result = repair_question_list_result(
            content,
            fallback=DOCUMENT_FALLBACK_QUESTIONS,
            source_document=interview.document,
        )
        if result.is_fallback:
            # Not stored, so a later fetch gets another chance at generation
            return result.value

        return await run_in_threadpool(self.interviews.set_questions_if_empty, interview.roomId, result.value)

    async def questions_for_interview(self, interview: Interview) -> List[str]:
        """Generic behavioural questions followed by the interview's technical questions."""
        technical = await self.technical_questions_for_interview(interview)
        return [*GENERIC_QUESTIONS, *technical]
